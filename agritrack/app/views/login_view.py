"""
LoginView
---------
Tkinter login window. View code only: credentials are handed to ``on_login``
and every other control reports its intent id through ``emit``.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from agritrack.domain.routes import WINDOW_CLOSE


class LoginView(tk.Toplevel):
    """Top-level login window (UI-only)."""

    OnLogin = Optional[Callable[[str, str], None]]
    Emit = Callable[[str], None]

    def __init__(
        self,
        parent: tk.Misc,
        *,
        title: str,
        emit: Emit,
        on_login: OnLogin = None,
        username: str = "",
    ) -> None:
        super().__init__(parent)
        self.title(title)
        self.resizable(False, False)

        self._emit = emit
        self._on_login = on_login

        self.username_var = tk.StringVar(value=username)
        self.password_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value=" ")

        self.protocol("WM_DELETE_WINDOW", lambda: self._emit(WINDOW_CLOSE))
        self._build_ui()
        self.bind("<Return>", lambda e: self._submit())

        self.update_idletasks()
        self.geometry(self._center_on_screen())
        self.focus_force()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        pad = dict(padx=12, pady=6)
        frame = ttk.Frame(self)
        frame.grid(row=0, column=0, sticky="nsew", **pad)
        frame.columnconfigure(1, weight=1)

        ttk.Label(frame, text="AgriTrack", font=("Segoe UI", 18, "bold")).grid(
            row=0, column=0, columnspan=2, pady=(0, 12)
        )
        ttk.Label(frame, text="Username:").grid(row=1, column=0, sticky="w")
        user_entry = ttk.Entry(frame, textvariable=self.username_var, width=28)
        user_entry.grid(row=1, column=1, sticky="ew", pady=2)
        ttk.Label(frame, text="Password:").grid(row=2, column=0, sticky="w")
        ttk.Entry(frame, textvariable=self.password_var, width=28, show="*").grid(
            row=2, column=1, sticky="ew", pady=2
        )

        buttons = ttk.Frame(frame)
        buttons.grid(row=3, column=0, columnspan=2, pady=(12, 0))
        ttk.Button(buttons, text="Login", command=self._submit).grid(row=0, column=0, padx=4)
        ttk.Button(buttons, text="Exit", command=lambda: self._emit("login.exit")).grid(
            row=0, column=1, padx=4
        )

        ttk.Label(frame, textvariable=self.status_var, foreground="#b00020").grid(
            row=4, column=0, columnspan=2, pady=(8, 0)
        )
        user_entry.focus_set()

    def _submit(self) -> None:
        if self._on_login is None:
            return
        username = self.username_var.get().strip()
        if not username:
            self.set_status("Please enter a username.")
            return
        self.set_status(" ")
        self._on_login(username, self.password_var.get())

    def set_status(self, message: str) -> None:
        self.status_var.set(message or " ")

    def _center_on_screen(self) -> str:
        w, h = self.winfo_width(), self.winfo_height()
        x = (self.winfo_screenwidth() - w) // 2
        y = (self.winfo_screenheight() - h) // 2
        return f"+{max(0, x)}+{max(0, y)}"
