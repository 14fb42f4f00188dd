"""Screen descriptors and the role sets that may open them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional

from .session import Role, Session


class ScreenType(str, Enum):
    LOGIN = "login"
    ADMIN_DASHBOARD = "admin_dashboard"
    SELLER_DASHBOARD = "seller_dashboard"
    BUYER_DASHBOARD = "buyer_dashboard"
    RECORDS_VIEW = "records_view"
    USER_MANAGEMENT = "user_management"


@dataclass(frozen=True)
class ScreenDescriptor:
    """Static description of a top-level screen.

    ``allowed_roles`` is only consulted when ``requires_session`` is set; the
    login screen is the single descriptor that runs without a session.
    """

    screen_type: ScreenType
    title: str
    allowed_roles: FrozenSet[Role] = field(default_factory=frozenset)
    requires_session: bool = True
    is_dashboard: bool = False
    implemented: bool = True

    def admits(self, session: Optional[Session]) -> bool:
        """Return True when the screen may be instantiated with ``session``."""
        if not self.requires_session:
            return session is None
        if session is None:
            return False
        return session.role in self.allowed_roles


_ALL_ROLES = frozenset(Role)

SCREENS: Dict[ScreenType, ScreenDescriptor] = {
    ScreenType.LOGIN: ScreenDescriptor(
        ScreenType.LOGIN,
        "AgriTrack - Login",
        requires_session=False,
    ),
    ScreenType.ADMIN_DASHBOARD: ScreenDescriptor(
        ScreenType.ADMIN_DASHBOARD,
        "AgriTrack - Admin Dashboard",
        frozenset({Role.ADMIN}),
        is_dashboard=True,
    ),
    ScreenType.SELLER_DASHBOARD: ScreenDescriptor(
        ScreenType.SELLER_DASHBOARD,
        "AgriTrack - Seller Dashboard",
        frozenset({Role.SELLER}),
        is_dashboard=True,
    ),
    ScreenType.BUYER_DASHBOARD: ScreenDescriptor(
        ScreenType.BUYER_DASHBOARD,
        "AgriTrack - Buyer Dashboard",
        frozenset({Role.BUYER}),
        is_dashboard=True,
    ),
    ScreenType.RECORDS_VIEW: ScreenDescriptor(
        ScreenType.RECORDS_VIEW,
        "AgriTrack - Inventory Records",
        _ALL_ROLES,
    ),
    # Declared in the admin UI but never built.
    ScreenType.USER_MANAGEMENT: ScreenDescriptor(
        ScreenType.USER_MANAGEMENT,
        "AgriTrack - User Management",
        frozenset({Role.ADMIN}),
        implemented=False,
    ),
}


__all__ = ["SCREENS", "ScreenDescriptor", "ScreenType"]
