"""Data-driven dispatch tables: which intents each screen exposes.

One table per screen type replaces per-role dashboard classes; the controller
is parameterized by a :class:`NavigationRoutes` instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .actions import Action, ActionName, DialogKind, exit_action, logout_action
from .screens import SCREENS, ScreenDescriptor, ScreenType
from .session import Role

IntentId = str

WINDOW_CLOSE: IntentId = "window.close"
"""Emitted by every surface when the window manager close button is used."""


@dataclass(frozen=True)
class NavigationRoutes:
    tables: Mapping[ScreenType, Mapping[IntentId, Action]]
    dashboards: Mapping[Role, ScreenType]
    screens: Mapping[ScreenType, ScreenDescriptor] = field(default_factory=lambda: dict(SCREENS))

    def descriptor(self, screen_type: ScreenType) -> ScreenDescriptor:
        return self.screens[screen_type]

    def dashboard_for(self, role: Role) -> Optional[ScreenDescriptor]:
        screen_type = self.dashboards.get(role)
        if screen_type is None:
            return None
        return self.screens.get(screen_type)

    def table_for(self, screen_type: ScreenType) -> Mapping[IntentId, Action]:
        return self.tables.get(screen_type, {})


def _unimplemented(name: ActionName, label: str, notice: str) -> Action:
    return Action(name, label, notice=notice)


def _build_default_tables() -> Dict[ScreenType, Dict[IntentId, Action]]:
    logout = logout_action()
    close_app = exit_action("Close")
    profile = Action(ActionName.PROFILE, "My Profile", dialog=DialogKind.PROFILE)
    return {
        ScreenType.LOGIN: {
            "login.exit": exit_action(),
            WINDOW_CLOSE: close_app,
        },
        ScreenType.ADMIN_DASHBOARD: {
            "dashboard.manage_users": _unimplemented(
                ActionName.MANAGE_USERS,
                "Manage Users",
                "User management feature - To be implemented",
            ),
            "dashboard.view_inventory": Action(
                ActionName.VIEW_INVENTORY,
                "View Inventory",
                target=ScreenType.RECORDS_VIEW,
            ),
            "dashboard.logout": logout,
            WINDOW_CLOSE: close_app,
        },
        ScreenType.SELLER_DASHBOARD: {
            "dashboard.add_harvest": Action(
                ActionName.ADD_HARVEST,
                "Add Harvest Record",
                dialog=DialogKind.HARVEST_FORM,
            ),
            "dashboard.view_records": Action(
                ActionName.VIEW_RECORDS,
                "View My Records",
                target=ScreenType.RECORDS_VIEW,
            ),
            "dashboard.profile": profile,
            "dashboard.logout": logout,
            WINDOW_CLOSE: close_app,
        },
        ScreenType.BUYER_DASHBOARD: {
            "dashboard.browse_harvests": Action(
                ActionName.BROWSE_HARVESTS,
                "Browse Available Harvests",
                target=ScreenType.RECORDS_VIEW,
            ),
            "dashboard.export_data": Action(
                ActionName.EXPORT_DATA,
                "Export to CSV",
                dialog=DialogKind.EXPORT,
            ),
            "dashboard.profile": profile,
            "dashboard.logout": logout,
            WINDOW_CLOSE: close_app,
        },
        ScreenType.RECORDS_VIEW: {
            "records.back": Action(ActionName.BACK, "Back", home=True),
            WINDOW_CLOSE: Action(ActionName.BACK, "Close", home=True),
        },
    }


DEFAULT_ROUTES = NavigationRoutes(
    tables=_build_default_tables(),
    dashboards={
        Role.ADMIN: ScreenType.ADMIN_DASHBOARD,
        Role.SELLER: ScreenType.SELLER_DASHBOARD,
        Role.BUYER: ScreenType.BUYER_DASHBOARD,
    },
)


def validate_routes(routes: NavigationRoutes) -> List[str]:
    """Return wiring problems; an empty list means every screen is consistent.

    Each action a screen exposes must lead somewhere that every role allowed
    on that screen may open, and every configured dashboard must admit the
    role it is registered for.
    """
    problems: List[str] = []
    for role, screen_type in routes.dashboards.items():
        descriptor = routes.screens.get(screen_type)
        if descriptor is None:
            problems.append(f"{role.value}: dashboard {screen_type.value} has no descriptor")
        elif role not in descriptor.allowed_roles or not descriptor.is_dashboard:
            problems.append(f"{role.value}: {screen_type.value} is not a dashboard for this role")

    for screen_type, table in routes.tables.items():
        descriptor = routes.screens.get(screen_type)
        if descriptor is None:
            problems.append(f"{screen_type.value}: dispatch table without descriptor")
            continue
        for intent_id, action in table.items():
            where = f"{screen_type.value}/{intent_id}"
            if not descriptor.requires_session:
                if action.is_navigational or action.dialog is not None:
                    problems.append(f"{where}: needs a session but screen has none")
                continue
            if action.home:
                for role in descriptor.allowed_roles:
                    if routes.dashboard_for(role) is None:
                        problems.append(f"{where}: no dashboard to return to for {role.value}")
                continue
            if action.target is None:
                continue
            target = routes.screens.get(action.target)
            if target is None:
                problems.append(f"{where}: unknown target {action.target.value}")
                continue
            for role in descriptor.allowed_roles:
                if role not in target.allowed_roles:
                    problems.append(f"{where}: {action.target.value} does not admit {role.value}")
    return problems


__all__ = [
    "DEFAULT_ROUTES",
    "IntentId",
    "NavigationRoutes",
    "WINDOW_CLOSE",
    "validate_routes",
]
