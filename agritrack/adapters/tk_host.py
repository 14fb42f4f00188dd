"""Tk implementations of the presentation ports.

Each top-level screen is a ``tk.Toplevel`` over a hidden root window, so
disposing a screen never ends the Tk main loop; only ``TkProcess`` does.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox
from typing import Callable, Optional

from agritrack.app.views.login_view import LoginView
from agritrack.app.views.profile_dialog import ProfileDialog
from agritrack.app.views.screen_view import ScreenView
from agritrack.domain.actions import DialogKind
from agritrack.domain.ports import EmitFn
from agritrack.domain.screens import ScreenDescriptor, ScreenType
from agritrack.domain.session import Session
from agritrack.viewmodels.screen_vm import ScreenVM


class TkScreenFactory:
    """Create Login/Screen views for descriptors and destroy them on dispose."""

    def __init__(
        self,
        root: tk.Misc,
        screen_vm: ScreenVM,
        *,
        on_login: Callable[[str, str], None],
        initial_username: Callable[[], str] = lambda: "",
    ) -> None:
        self.root = root
        self.screen_vm = screen_vm
        self._on_login = on_login
        self._initial_username = initial_username
        self.active: Optional[tk.Toplevel] = None

    def create_screen(
        self, descriptor: ScreenDescriptor, session: Optional[Session], emit: EmitFn
    ) -> tk.Toplevel:
        if descriptor.screen_type is ScreenType.LOGIN:
            view: tk.Toplevel = LoginView(
                self.root,
                title=self.screen_vm.content_for(descriptor, None).title,
                emit=emit,
                on_login=self._on_login,
                username=self._initial_username(),
            )
        else:
            view = ScreenView(
                self.root,
                content=self.screen_vm.content_for(descriptor, session),
                emit=emit,
            )
        self.active = view
        return view

    def dispose(self, handle: tk.Toplevel) -> None:
        if self.active is handle:
            self.active = None
        handle.destroy()


class TkNotifier:
    def __init__(self, factory: TkScreenFactory) -> None:
        self._factory = factory

    def notify(self, title: str, message: str) -> None:
        messagebox.showinfo(title, message, parent=self._factory.active)

    def error(self, title: str, message: str) -> None:
        messagebox.showerror(title, message, parent=self._factory.active)


class TkPrompter:
    def __init__(self, factory: TkScreenFactory) -> None:
        self._factory = factory

    def confirm(self, title: str, message: str) -> bool:
        return bool(messagebox.askyesno(title, message, parent=self._factory.active))


class TkDialogs:
    """Open in-place dialogs; inventory dialogs belong to the records module."""

    def __init__(self, factory: TkScreenFactory) -> None:
        self._factory = factory
        self._log = logging.getLogger(__name__)

    def open_dialog(self, kind: DialogKind, session: Session) -> None:
        parent = self._factory.active or self._factory.root
        if kind is DialogKind.PROFILE:
            ProfileDialog(parent, session)
            return
        self._log.info("Dialog %s is provided by the inventory module", kind.value)
        messagebox.showinfo(
            "Inventory",
            "This form is provided by the inventory records module.",
            parent=parent,
        )


class TkProcess:
    def __init__(self, root: tk.Tk) -> None:
        self.root = root

    def terminate(self) -> None:
        self.root.quit()


__all__ = ["TkDialogs", "TkNotifier", "TkProcess", "TkPrompter", "TkScreenFactory"]
