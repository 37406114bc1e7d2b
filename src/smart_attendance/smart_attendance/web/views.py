from __future__ import annotations

from ..core.constants import DEMO_PASSWORD, GOOD_ATTENDANCE, WARNING_ATTENDANCE
from ..core.enums import Role
from ..users.demo_account_repository import DEMO_ACCOUNTS


def attendance_badge(percentage: float) -> str:
    if percentage >= GOOD_ATTENDANCE:
        return "good"
    if percentage >= WARNING_ATTENDANCE:
        return "warning"
    return "danger"


def dashboard_title(role: Role) -> str:
    return f"{'Admin' if role == Role.ADMIN else role.label} Dashboard"


def demo_credentials() -> list[dict]:
    """Hints shown under the login form."""
    return [
        {"label": "Admin" if a.role == Role.ADMIN else a.role.label, "user_id": a.user_id, "password": DEMO_PASSWORD}
        for a in DEMO_ACCOUNTS
    ]
