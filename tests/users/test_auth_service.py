from __future__ import annotations

from typing import Optional

import pytest

from src.smart_attendance.smart_attendance.core.enums import Role
from src.smart_attendance.smart_attendance.core.exceptions import AuthenticationError
from src.smart_attendance.smart_attendance.users.demo_account_repository import DemoAccountRepository
from src.smart_attendance.smart_attendance.users.model import DemoAccount, SessionUser
from src.smart_attendance.smart_attendance.users.service import AuthService


class InMemoryAccounts:
    def __init__(self, *accounts: DemoAccount):
        self._by_id = {a.user_id: a for a in accounts}

    def get_by_user_id(self, user_id: str) -> Optional[DemoAccount]:
        return self._by_id.get(user_id)

    def list_all(self):
        return list(self._by_id.values())


def test_demo_repository_has_three_accounts():
    accounts = DemoAccountRepository().list_all()
    assert {a.user_id for a in accounts} == {"ADMIN001", "FAC001", "STU001"}
    assert {a.role for a in accounts} == set(Role)


def test_authenticate_ok():
    auth = AuthService(DemoAccountRepository())

    result = auth.authenticate("FAC001", "demo123", "faculty")

    assert result.token == "demo-jwt-token"
    assert result.user == SessionUser(user_id="FAC001", role=Role.FACULTY, name="Dr. Michael Chen")


def test_authenticate_ignores_submitted_role():
    auth = AuthService(DemoAccountRepository())
    assert auth.authenticate("STU001", "demo123", "admin").user.role == Role.STUDENT


@pytest.mark.parametrize(
    "user_id,password",
    [
        ("STU001", "demo124"),
        ("STU001", ""),
        ("STU001", None),
        ("STU001", "\ud800"),
        ("GHOST", "demo123"),
        (None, "demo123"),
        (123, "demo123"),
    ],
)
def test_authenticate_rejects(user_id, password):
    auth = AuthService(DemoAccountRepository())

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        auth.authenticate(user_id, password)


def test_authenticate_uses_repository_and_configured_secret():
    account = DemoAccount(user_id="T1", role=Role.STUDENT, name="Test Student")
    auth = AuthService(InMemoryAccounts(account), password="s3cret", token="tok")

    result = auth.authenticate("T1", "s3cret")
    assert result.to_dict() == {"token": "tok", "user": {"userId": "T1", "role": "student", "name": "Test Student"}}

    with pytest.raises(AuthenticationError):
        auth.authenticate("T1", "demo123")


def test_session_user_round_trips_through_dict():
    user = SessionUser(user_id="ADMIN001", role=Role.ADMIN, name="System Administrator")
    assert SessionUser.from_dict(user.to_dict()) == user
