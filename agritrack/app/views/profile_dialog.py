from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from agritrack.domain.session import Session


class ProfileDialog(tk.Toplevel):
    """Read-only account summary shown over the active screen."""

    def __init__(self, parent: tk.Misc, session: Session) -> None:
        super().__init__(parent)
        self.title("My Profile")
        self.transient(parent)
        self.resizable(False, False)

        frame = ttk.Frame(self)
        frame.grid(row=0, column=0, padx=16, pady=12)
        rows = (
            ("Name:", session.display_name),
            ("Username:", session.username or "-"),
            ("Role:", session.role_name),
        )
        for row, (label, value) in enumerate(rows):
            ttk.Label(frame, text=label).grid(row=row, column=0, sticky="w", padx=(0, 8))
            ttk.Label(frame, text=value).grid(row=row, column=1, sticky="w")
        ttk.Button(frame, text="Close", command=self.destroy).grid(
            row=len(rows), column=0, columnspan=2, pady=(12, 0)
        )

        self.grab_set()
        self.focus_set()
