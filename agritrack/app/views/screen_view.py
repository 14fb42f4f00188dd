"""Generic session screen: dashboards and the records view share this window.

Buttons come from :class:`agritrack.viewmodels.screen_vm.ScreenContent`; the
view never decides what a button does, it only emits the bound intent id.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from agritrack.domain.routes import WINDOW_CLOSE
from agritrack.viewmodels.screen_vm import ScreenContent


class ScreenView(tk.Toplevel):
    """Top-level window rendering one ScreenContent (UI-only)."""

    def __init__(self, parent: tk.Misc, *, content: ScreenContent, emit: Callable[[str], None]) -> None:
        super().__init__(parent)
        self.title(content.title)
        self.geometry("800x600")
        self.minsize(480, 360)

        self._emit = emit
        self.protocol("WM_DELETE_WINDOW", lambda: self._emit(WINDOW_CLOSE))

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)
        self._build_header(content)
        self._build_buttons(content)

        self.update_idletasks()
        x = (self.winfo_screenwidth() - 800) // 2
        y = (self.winfo_screenheight() - 600) // 2
        self.geometry(f"+{max(0, x)}+{max(0, y)}")
        self.focus_force()

    def _build_header(self, content: ScreenContent) -> None:
        header = ttk.Frame(self)
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 8))
        ttk.Label(header, text=content.heading, font=("Segoe UI", 24, "bold")).pack(anchor="w")
        if content.welcome:
            ttk.Label(header, text=content.welcome, font=("Segoe UI", 12)).pack(anchor="w", pady=(4, 0))

    def _build_buttons(self, content: ScreenContent) -> None:
        body = ttk.Frame(self)
        body.grid(row=1, column=0, sticky="nsew", padx=16, pady=8)
        body.columnconfigure(0, weight=1)
        ttk.Style(self).configure("Destructive.TButton", foreground="#b3261e")
        for row, spec in enumerate(content.buttons):
            btn = ttk.Button(
                body,
                text=spec.label,
                style=spec.style,
                command=lambda iid=spec.intent_id: self._emit(iid),
            )
            btn.grid(row=row, column=0, sticky="ew", pady=6, ipady=6)
