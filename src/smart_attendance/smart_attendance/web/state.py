from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional

from ..users.model import SessionUser
from .client import ApiClient, ApiError


@dataclass(frozen=True)
class DashboardView:
    stats: dict
    students: list[dict]
    courses: list[dict]


class ClientApplication:
    """Client-side state: the single current user and the calls made for it."""

    def __init__(self, api: ApiClient, current_user: Optional[SessionUser] = None):
        self._api = api
        self._current_user = current_user

    @property
    def current_user(self) -> Optional[SessionUser]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def login(self, user_id: str, password: str, role: str) -> SessionUser:
        data = self._api.login(user_id, password, role)
        try:
            user = SessionUser.from_dict(data["user"])
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(f"unexpected login response: {e}") from e
        self._current_user = user
        return user

    def logout(self) -> None:
        self._current_user = None

    def load_dashboard(self) -> DashboardView:
        """Fetch stats, students and courses concurrently; fails if any call fails."""
        with ThreadPoolExecutor(max_workers=3) as pool:
            stats_f = pool.submit(self._api.get_stats)
            students_f = pool.submit(self._api.get_students)
            courses_f = pool.submit(self._api.get_courses)
            wait([stats_f, students_f, courses_f])

        return DashboardView(
            stats=stats_f.result(),
            students=students_f.result(),
            courses=courses_f.result(),
        )
