"""Domain-level error types for navigation and session lifecycle.

``UnknownIntent`` and ``ForbiddenTransition`` signal wiring defects and are
contained by the navigation controller. ``UnsupportedRole`` and
``ScreenCreationFailed`` are surfaced to the user.
"""

from __future__ import annotations

from typing import Optional


class NavigationError(Exception):
    """Base class for navigation errors with a stable code."""

    code = "NAVIGATION_ERROR"

    def __init__(self, message: str, *, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class UnknownIntent(NavigationError):
    code = "UNKNOWN_INTENT"

    def __init__(self, screen: str, intent_id: str) -> None:
        super().__init__(f"Intent '{intent_id}' is not registered for screen '{screen}'.")
        self.screen = screen
        self.intent_id = intent_id


class ForbiddenTransition(NavigationError):
    code = "FORBIDDEN_TRANSITION"


class UnsupportedRole(NavigationError):
    code = "UNSUPPORTED_ROLE"

    def __init__(self, role: object) -> None:
        super().__init__(f"No dashboard is configured for role '{role}'.")
        self.role = role


class ScreenCreationFailed(NavigationError):
    code = "SCREEN_CREATION_FAILED"


__all__ = [
    "ForbiddenTransition",
    "NavigationError",
    "ScreenCreationFailed",
    "UnknownIntent",
    "UnsupportedRole",
]
