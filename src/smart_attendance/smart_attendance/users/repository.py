from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DemoAccount


class AccountRepository(Protocol):
    """Repository interface for login accounts.

    Note: the service depends on this interface, not on a concrete store.
    """

    def get_by_user_id(self, user_id: str) -> Optional[DemoAccount]:
        raise NotImplementedError

    def list_all(self) -> Sequence[DemoAccount]:
        raise NotImplementedError
