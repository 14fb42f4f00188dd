"""Domain package exports for sessions, screens, actions and routes."""

from .actions import Action, ActionName, DialogKind, Prompt
from .errors import (
    ForbiddenTransition,
    NavigationError,
    ScreenCreationFailed,
    UnknownIntent,
    UnsupportedRole,
)
from .navigation import NavigationState, NavPhase
from .routes import DEFAULT_ROUTES, WINDOW_CLOSE, NavigationRoutes, validate_routes
from .screens import SCREENS, ScreenDescriptor, ScreenType
from .session import Role, Session

__all__ = [
    "Action",
    "ActionName",
    "DEFAULT_ROUTES",
    "DialogKind",
    "ForbiddenTransition",
    "NavPhase",
    "NavigationError",
    "NavigationRoutes",
    "NavigationState",
    "Prompt",
    "Role",
    "SCREENS",
    "ScreenCreationFailed",
    "ScreenDescriptor",
    "ScreenType",
    "Session",
    "UnknownIntent",
    "UnsupportedRole",
    "WINDOW_CLOSE",
    "validate_routes",
]
