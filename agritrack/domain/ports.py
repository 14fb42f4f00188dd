from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from .actions import DialogKind
from .screens import ScreenDescriptor
from .session import Session

ScreenHandle = Any
EmitFn = Callable[[str], None]
"""Callback a surface uses to report an activated control by intent id."""


# ---- Ports (Hexagonal boundaries) ----
class ScreenFactoryPort(Protocol):
    """Create and release top-level screen surfaces.

    Any rendering technology can implement this; the controller only keeps
    the returned handle and passes it back to ``dispose``.
    """

    def create_screen(
        self, descriptor: ScreenDescriptor, session: Optional[Session], emit: EmitFn
    ) -> ScreenHandle: ...
    def dispose(self, handle: ScreenHandle) -> None: ...


class NotifierPort(Protocol):
    """Informational and error notices shown by the host UI."""

    def notify(self, title: str, message: str) -> None: ...
    def error(self, title: str, message: str) -> None: ...


class PrompterPort(Protocol):
    """Blocking yes/no prompt; returns True only for an explicit yes."""

    def confirm(self, title: str, message: str) -> bool: ...


class DialogPort(Protocol):
    """In-place dialogs layered over the active screen (profile, forms)."""

    def open_dialog(self, kind: DialogKind, session: Session) -> None: ...


class ProcessPort(Protocol):
    """Ends the host process / main loop."""

    def terminate(self) -> None: ...


class AuthPort(Protocol):
    """Upstream authentication step; not part of the navigation core."""

    def authenticate(self, username: str, password: str) -> Optional[Session]: ...
