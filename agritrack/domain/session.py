"""Authenticated identity and role that drive screen reachability."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Closed set of account roles known to the navigation layer."""

    ADMIN = "ADMIN"
    SELLER = "SELLER"
    BUYER = "BUYER"

    @classmethod
    def parse(cls, value: object) -> "Role":
        """Return the role for ``value`` (case-insensitive name or member)."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown role: {value!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Session:
    """Result of a successful login; a fresh instance is created per login."""

    user_id: str
    display_name: str
    role: Role
    username: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.user_id, str) or not self.user_id.strip():
            raise ValueError("Session.user_id must be a non-empty string.")
        if not isinstance(self.display_name, str) or not self.display_name.strip():
            raise ValueError("Session.display_name must be a non-empty string.")

    @property
    def role_name(self) -> str:
        return getattr(self.role, "value", str(self.role))


__all__ = ["Role", "Session"]
