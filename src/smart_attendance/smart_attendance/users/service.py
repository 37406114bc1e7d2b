from __future__ import annotations

import hmac
import logging
from typing import Optional

from ..core.constants import DEMO_PASSWORD, DEMO_TOKEN
from ..core.exceptions import AuthenticationError
from .model import LoginResult, SessionUser
from .repository import AccountRepository

logger = logging.getLogger(__name__)


def _to_bytes(value: str) -> bytes:
    # JSON strings may carry lone surrogates
    return value.encode("utf-8", "surrogatepass")


class AuthService:
    """Use case: authenticate a demo user (login).

    Any known user id with the shared demo password is accepted. The role sent
    by the form is informational only; the account's own role is returned.
    """

    def __init__(self, accounts: AccountRepository, *, password: str = DEMO_PASSWORD, token: str = DEMO_TOKEN):
        self._accounts = accounts
        self._password = password
        self._token = token

    def authenticate(self, user_id: Optional[str], password: Optional[str], role: Optional[str] = None) -> LoginResult:
        account = self._accounts.get_by_user_id(user_id) if isinstance(user_id, str) else None
        ok = account is not None and isinstance(password, str)
        if not ok or not hmac.compare_digest(_to_bytes(password), _to_bytes(self._password)):
            logger.info("login rejected for user_id=%r", user_id)
            raise AuthenticationError("Invalid credentials")

        if role and role != account.role.value:
            logger.debug("login for %s sent role=%r, account role is %s", account.user_id, role, account.role.value)

        logger.info("login ok for %s (%s)", account.user_id, account.role.value)
        return LoginResult(
            token=self._token,
            user=SessionUser(user_id=account.user_id, role=account.role, name=account.name),
        )
