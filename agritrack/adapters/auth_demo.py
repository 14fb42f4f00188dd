"""In-memory stand-in for the upstream login step.

Real authentication is outside the desktop shell; this adapter only exists so
the shell can be started and exercised with the seeded demo accounts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from agritrack.domain.session import Role, Session


@dataclass(frozen=True)
class DemoAccount:
    user_id: str
    username: str
    password: str
    display_name: str
    role: Role


DEFAULT_ACCOUNTS = (
    DemoAccount("1", "admin", "admin123", "Admin User", Role.ADMIN),
    DemoAccount("2", "seller", "seller123", "Juan Dela Cruz (Farmer)", Role.SELLER),
    DemoAccount("3", "buyer", "buyer123", "John Buyer", Role.BUYER),
)


class DemoAuthenticator:
    """Match username/password against a fixed account list."""

    def __init__(self, accounts: Iterable[DemoAccount] = DEFAULT_ACCOUNTS) -> None:
        self._accounts: Dict[str, DemoAccount] = {
            account.username.lower(): account for account in accounts
        }
        self._log = logging.getLogger(__name__)

    def authenticate(self, username: str, password: str) -> Optional[Session]:
        account = self._accounts.get((username or "").strip().lower())
        if account is None or account.password != password:
            self._log.info("Login rejected for %r", username)
            return None
        return Session(
            user_id=account.user_id,
            display_name=account.display_name,
            role=account.role,
            username=account.username,
        )


__all__ = ["DEFAULT_ACCOUNTS", "DemoAccount", "DemoAuthenticator"]
