"""View-facing content for a single screen surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..domain.routes import WINDOW_CLOSE, IntentId
from ..domain.screens import ScreenDescriptor
from ..domain.session import Session
from ..usecases.resolve_intent import ActionDispatcher


@dataclass(frozen=True)
class ButtonSpec:
    intent_id: IntentId
    label: str
    destructive: bool = False

    @property
    def style(self) -> str:
        """ttk style name; destructive actions stand apart from navigation."""
        return "Destructive.TButton" if self.destructive else "TButton"


@dataclass(frozen=True)
class ScreenContent:
    title: str
    heading: str
    welcome: str
    buttons: Tuple[ButtonSpec, ...]


class ScreenVM:
    """Build titles and button lists from the dispatch table of a screen.

    Surfaces render exactly the intents listed here, so every control they
    emit is registered for the screen they belong to.
    """

    def __init__(self, dispatcher: ActionDispatcher, *, app_title: str = "AgriTrack") -> None:
        self.dispatcher = dispatcher
        self.app_title = app_title

    def content_for(self, descriptor: ScreenDescriptor, session: Optional[Session]) -> ScreenContent:
        heading = self._heading(descriptor)
        welcome = f"Welcome, {session.display_name}" if session else ""
        return ScreenContent(
            title=self._window_title(descriptor),
            heading=heading,
            welcome=welcome,
            buttons=tuple(self.buttons_for(descriptor)),
        )

    def buttons_for(self, descriptor: ScreenDescriptor) -> List[ButtonSpec]:
        buttons: List[ButtonSpec] = []
        for intent_id, action in self.dispatcher.intents_for(descriptor.screen_type):
            if intent_id == WINDOW_CLOSE:
                continue
            buttons.append(ButtonSpec(intent_id, action.label, action.destructive))
        return buttons

    def _window_title(self, descriptor: ScreenDescriptor) -> str:
        # Descriptor titles carry the default "AgriTrack - " prefix.
        _, sep, suffix = descriptor.title.partition(" - ")
        if not sep:
            return descriptor.title
        return f"{self.app_title} - {suffix}"

    @staticmethod
    def _heading(descriptor: ScreenDescriptor) -> str:
        _, sep, suffix = descriptor.title.partition(" - ")
        return suffix if sep else descriptor.title


__all__ = ["ButtonSpec", "ScreenContent", "ScreenVM"]
