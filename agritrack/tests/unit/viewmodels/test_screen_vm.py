from __future__ import annotations

from agritrack.domain.routes import DEFAULT_ROUTES, WINDOW_CLOSE
from agritrack.domain.screens import SCREENS, ScreenType
from agritrack.domain.session import Role, Session
from agritrack.usecases.resolve_intent import ActionDispatcher
from agritrack.viewmodels.screen_vm import ButtonSpec, ScreenVM


def _vm(title: str = "AgriTrack") -> ScreenVM:
    return ScreenVM(ActionDispatcher(DEFAULT_ROUTES), app_title=title)


def test_admin_dashboard_content() -> None:
    session = Session(user_id="1", display_name="Admin User", role=Role.ADMIN)

    content = _vm().content_for(SCREENS[ScreenType.ADMIN_DASHBOARD], session)

    assert content.title == "AgriTrack - Admin Dashboard"
    assert content.heading == "Admin Dashboard"
    assert content.welcome == "Welcome, Admin User"
    assert content.buttons == (
        ButtonSpec("dashboard.manage_users", "Manage Users"),
        ButtonSpec("dashboard.view_inventory", "View Inventory"),
        ButtonSpec("dashboard.logout", "Logout", destructive=True),
    )


def test_window_close_is_not_rendered_as_button() -> None:
    vm = _vm()
    for screen_type in DEFAULT_ROUTES.tables:
        ids = [b.intent_id for b in vm.buttons_for(SCREENS[screen_type])]
        assert WINDOW_CLOSE not in ids


def test_every_button_is_registered_for_its_screen() -> None:
    vm = _vm()
    dispatcher = vm.dispatcher
    for screen_type in DEFAULT_ROUTES.tables:
        for button in vm.buttons_for(SCREENS[screen_type]):
            assert dispatcher.resolve(screen_type, button.intent_id).label == button.label


def test_custom_app_title_and_login_has_no_welcome() -> None:
    content = _vm("FarmDesk").content_for(SCREENS[ScreenType.LOGIN], None)
    assert content.title == "FarmDesk - Login"
    assert content.welcome == ""
    assert [b.intent_id for b in content.buttons] == ["login.exit"]


def test_destructive_buttons_get_their_own_style() -> None:
    buttons = _vm().buttons_for(SCREENS[ScreenType.SELLER_DASHBOARD])
    styles = {b.intent_id: b.style for b in buttons}
    assert styles["dashboard.logout"] == "Destructive.TButton"
    assert styles["dashboard.view_records"] == "TButton"
