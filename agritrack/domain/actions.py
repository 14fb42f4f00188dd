"""Logical actions a screen can request, independent of widget identity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .screens import ScreenType


class ActionName(str, Enum):
    MANAGE_USERS = "manage_users"
    VIEW_INVENTORY = "view_inventory"
    LOGOUT = "logout"
    ADD_HARVEST = "add_harvest"
    VIEW_RECORDS = "view_records"
    BROWSE_HARVESTS = "browse_harvests"
    EXPORT_DATA = "export_data"
    PROFILE = "profile"
    BACK = "back"
    EXIT = "exit"


class DialogKind(str, Enum):
    """In-place dialogs opened on top of the active screen."""

    PROFILE = "profile"
    HARVEST_FORM = "harvest_form"
    EXPORT = "export"


@dataclass(frozen=True)
class Prompt:
    title: str
    message: str


@dataclass(frozen=True)
class Action:
    """A resolved user intent.

    Exactly one outcome applies, checked in this order by the controller:
    destructive (gated, then logout or process exit), ``dialog`` (in-place),
    ``home``/``target`` (screen replacement), otherwise an informational
    notice for a feature that is declared but not built.
    """

    name: ActionName
    label: str
    destructive: bool = False
    target: Optional[ScreenType] = None
    dialog: Optional[DialogKind] = None
    home: bool = False
    terminates_process: bool = False
    prompt: Optional[Prompt] = None
    notice: str = ""

    def __post_init__(self) -> None:
        if self.destructive and self.prompt is None:
            raise ValueError(f"Destructive action {self.name.value} needs a confirmation prompt.")
        if self.terminates_process and not self.destructive:
            raise ValueError("Process termination must be confirmed (destructive=True).")
        if self.target is not None and self.home:
            raise ValueError("Action cannot have both an explicit target and home=True.")

    @property
    def is_navigational(self) -> bool:
        return not self.destructive and self.dialog is None and (self.home or self.target is not None)

    @property
    def is_unimplemented(self) -> bool:
        return (
            not self.destructive
            and self.dialog is None
            and not self.home
            and self.target is None
        )


LOGOUT_PROMPT = Prompt("Confirm Logout", "Are you sure you want to logout?")
EXIT_PROMPT = Prompt("Confirm Exit", "Do you want to exit the application?")


def logout_action() -> Action:
    return Action(ActionName.LOGOUT, "Logout", destructive=True, prompt=LOGOUT_PROMPT)


def exit_action(label: str = "Exit") -> Action:
    return Action(
        ActionName.EXIT,
        label,
        destructive=True,
        terminates_process=True,
        prompt=EXIT_PROMPT,
    )


__all__ = [
    "Action",
    "ActionName",
    "DialogKind",
    "EXIT_PROMPT",
    "LOGOUT_PROMPT",
    "Prompt",
    "exit_action",
    "logout_action",
]
