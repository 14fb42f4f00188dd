"""Immutable snapshot of the single active top-level screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .screens import ScreenDescriptor, ScreenType
from .session import Role, Session


class NavPhase(str, Enum):
    ON_LOGIN = "on_login"
    ON_DASHBOARD = "on_dashboard"
    ON_SUB_VIEW = "on_sub_view"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class NavigationState:
    """Active screen, its live surface handle and the bound session.

    Only the navigation controller builds new instances; everything else
    reads them.
    """

    screen: ScreenDescriptor
    handle: Any = None
    session: Optional[Session] = None
    terminated: bool = False

    def __post_init__(self) -> None:
        if self.terminated:
            return
        if self.screen.requires_session and self.session is None:
            raise ValueError(f"{self.screen.screen_type.value} requires a session.")
        if not self.screen.requires_session and self.session is not None:
            raise ValueError("Login screen cannot hold a session.")

    @property
    def phase(self) -> NavPhase:
        if self.terminated:
            return NavPhase.TERMINATED
        if self.session is None:
            return NavPhase.ON_LOGIN
        if self.screen.is_dashboard:
            return NavPhase.ON_DASHBOARD
        return NavPhase.ON_SUB_VIEW

    @property
    def screen_type(self) -> ScreenType:
        return self.screen.screen_type

    @property
    def role(self) -> Optional[Role]:
        return self.session.role if self.session else None

    def describe(self) -> str:
        if self.phase is NavPhase.ON_LOGIN or self.phase is NavPhase.TERMINATED:
            return self.phase.value
        return f"{self.phase.value}({self.session.role_name}, {self.screen_type.value})"


__all__ = ["NavPhase", "NavigationState"]
