from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from .model import DemoAccount


DEMO_ACCOUNTS: tuple[DemoAccount, ...] = (
    DemoAccount(user_id="ADMIN001", role=Role.ADMIN, name="System Administrator"),
    DemoAccount(user_id="FAC001", role=Role.FACULTY, name="Dr. Michael Chen"),
    DemoAccount(user_id="STU001", role=Role.STUDENT, name="Alice Johnson"),
)


class DemoAccountRepository:
    """Fixed in-memory account table."""

    def __init__(self, accounts: Sequence[DemoAccount] = DEMO_ACCOUNTS):
        self._by_id = {a.user_id: a for a in accounts}

    def get_by_user_id(self, user_id: str) -> Optional[DemoAccount]:
        return self._by_id.get(user_id)

    def list_all(self) -> Sequence[DemoAccount]:
        return list(self._by_id.values())
