from __future__ import annotations

import threading

import pytest

from src.smart_attendance.smart_attendance.core.enums import Role
from src.smart_attendance.smart_attendance.web.client import ApiClient, ApiError
from src.smart_attendance.smart_attendance.web.state import ClientApplication


class FakeApi:
    """Dashboard calls meet at a barrier, so they only finish if run concurrently."""

    def __init__(self, *, fail_on: str | None = None):
        self._barrier = threading.Barrier(3, timeout=5)
        self._fail_on = fail_on
        self.calls: list[str] = []

    def _call(self, name, result):
        self.calls.append(name)
        self._barrier.wait()
        if name == self._fail_on:
            raise ApiError(f"{name} failed", status=500)
        return result

    def login(self, user_id, password, role):
        if user_id != "FAC001" or password != "demo123":
            raise ApiError("Invalid credentials", status=401)
        return {"token": "demo-jwt-token", "user": {"userId": "FAC001", "role": "faculty", "name": "Dr. Michael Chen"}}

    def get_stats(self):
        return self._call("stats", {"totalStudents": 1250})

    def get_students(self):
        return self._call("students", [{"id": "ST001"}])

    def get_courses(self):
        return self._call("courses", [{"id": "CS101"}])


def test_starts_logged_out():
    app = ClientApplication(FakeApi())
    assert app.current_user is None
    assert not app.is_authenticated


def test_login_holds_user_and_logout_clears_it():
    app = ClientApplication(FakeApi())

    user = app.login("FAC001", "demo123", "faculty")

    assert user.role == Role.FACULTY
    assert app.current_user == user
    assert app.is_authenticated

    app.logout()
    assert app.current_user is None


def test_failed_login_keeps_user_unset():
    app = ClientApplication(FakeApi())

    with pytest.raises(ApiError):
        app.login("FAC001", "nope", "faculty")
    assert app.current_user is None


def test_malformed_login_response_is_api_error():
    class BrokenApi(FakeApi):
        def login(self, user_id, password, role):
            return {"token": "t"}

    app = ClientApplication(BrokenApi())
    with pytest.raises(ApiError):
        app.login("FAC001", "demo123", "faculty")
    assert app.current_user is None


def test_load_dashboard_fetches_all_three_concurrently():
    api = FakeApi()

    view = ClientApplication(api).load_dashboard()

    assert sorted(api.calls) == ["courses", "stats", "students"]
    assert view.stats == {"totalStudents": 1250}
    assert view.students == [{"id": "ST001"}]
    assert view.courses == [{"id": "CS101"}]


@pytest.mark.parametrize("failing", ["stats", "students", "courses"])
def test_load_dashboard_fails_as_a_whole(failing):
    api = FakeApi(fail_on=failing)

    with pytest.raises(ApiError, match=failing):
        ClientApplication(api).load_dashboard()
    assert len(api.calls) == 3


def test_end_to_end_against_api_app(api_session):
    app = ClientApplication(ApiClient("http://localhost/api", session=api_session))

    app.login("ADMIN001", "demo123", "admin")
    view = app.load_dashboard()

    assert app.current_user.name == "System Administrator"
    assert view.stats["totalCourses"] == 156
    assert [s["name"] for s in view.students] == ["Alice Johnson", "Bob Smith", "Carol Davis"]
    assert len(view.courses) == 2
