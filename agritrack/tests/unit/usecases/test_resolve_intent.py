from __future__ import annotations

import pytest

from agritrack.domain.actions import ActionName
from agritrack.domain.errors import UnknownIntent
from agritrack.domain.routes import DEFAULT_ROUTES, WINDOW_CLOSE
from agritrack.domain.screens import ScreenType
from agritrack.usecases.resolve_intent import ActionDispatcher


def test_resolve_returns_bound_action() -> None:
    dispatcher = ActionDispatcher(DEFAULT_ROUTES)
    action = dispatcher.resolve(ScreenType.ADMIN_DASHBOARD, "dashboard.view_inventory")
    assert action.name is ActionName.VIEW_INVENTORY
    assert action.target is ScreenType.RECORDS_VIEW


def test_same_intent_id_differs_per_screen() -> None:
    dispatcher = ActionDispatcher(DEFAULT_ROUTES)
    on_login = dispatcher(ScreenType.LOGIN, WINDOW_CLOSE)
    on_records = dispatcher(ScreenType.RECORDS_VIEW, WINDOW_CLOSE)
    assert on_login.terminates_process
    assert on_records.home and not on_records.destructive


def test_unknown_intent_raises() -> None:
    dispatcher = ActionDispatcher(DEFAULT_ROUTES)
    with pytest.raises(UnknownIntent) as info:
        dispatcher.resolve(ScreenType.BUYER_DASHBOARD, "dashboard.manage_users")
    assert info.value.code == "UNKNOWN_INTENT"
    assert info.value.screen == "buyer_dashboard"


def test_screen_without_table_has_no_intents() -> None:
    dispatcher = ActionDispatcher(DEFAULT_ROUTES)
    assert dispatcher.intents_for(ScreenType.USER_MANAGEMENT) == []
    with pytest.raises(UnknownIntent):
        dispatcher.resolve(ScreenType.USER_MANAGEMENT, "anything")


def test_intents_keep_table_order() -> None:
    dispatcher = ActionDispatcher(DEFAULT_ROUTES)
    ids = [intent_id for intent_id, _ in dispatcher.intents_for(ScreenType.SELLER_DASHBOARD)]
    assert ids == [
        "dashboard.add_harvest",
        "dashboard.view_records",
        "dashboard.profile",
        "dashboard.logout",
        WINDOW_CLOSE,
    ]


def test_non_string_intent_id_is_unknown() -> None:
    dispatcher = ActionDispatcher(DEFAULT_ROUTES)
    with pytest.raises(UnknownIntent):
        dispatcher.resolve(ScreenType.ADMIN_DASHBOARD, ["dashboard.logout"])
