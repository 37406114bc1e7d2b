from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class DemoAccount:
    """Domain entity: one of the fixed demo accounts.

    Note: Plain data object, there is no password stored per account.
    """

    user_id: str
    role: Role
    name: str


@dataclass(frozen=True)
class SessionUser:
    """What the client keeps after login."""

    user_id: str
    role: Role
    name: str

    def to_dict(self) -> dict:
        return {"userId": self.user_id, "role": self.role.value, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "SessionUser":
        return cls(user_id=str(data["userId"]), role=Role(data["role"]), name=str(data["name"]))


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: SessionUser

    def to_dict(self) -> dict:
        return {"token": self.token, "user": self.user.to_dict()}
