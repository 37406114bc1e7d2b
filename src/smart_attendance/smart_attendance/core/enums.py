from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role as sent by the login form and returned by the API."""

    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"

    @property
    def label(self) -> str:
        return {
            Role.ADMIN: "Administrator",
            Role.FACULTY: "Faculty",
            Role.STUDENT: "Student",
        }[self]
