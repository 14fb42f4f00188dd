"""Translate navigation errors into user-facing (title, message) pairs."""

from __future__ import annotations

from typing import Optional, Tuple

from agritrack.domain.errors import (
    ForbiddenTransition,
    NavigationError,
    ScreenCreationFailed,
    UnknownIntent,
    UnsupportedRole,
)


def map_navigation_error(
    exc: Exception,
    *,
    default_title: str = "Error",
    default_message: Optional[str] = None,
) -> Tuple[str, str]:
    """Return a dialog title and message for ``exc``.

    Wiring defects (unknown intents, forbidden transitions) get a generic text
    because their details only mean something to developers.
    """
    if isinstance(exc, UnsupportedRole):
        return (
            "Login Failed",
            f"Your account role '{exc.role}' has no dashboard. Please contact support.",
        )
    if isinstance(exc, ScreenCreationFailed):
        return ("Screen Error", _compose_error_message("Could not open the requested screen", exc.message))
    if isinstance(exc, (UnknownIntent, ForbiddenTransition)):
        return ("Navigation Error", "This action is not available here.")
    if isinstance(exc, NavigationError):
        return (default_title, exc.message)

    message = default_message or str(exc) or "Unexpected error."
    return (default_title, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_navigation_error"]
