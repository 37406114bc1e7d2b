from __future__ import annotations

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Any failed API call: transport error, non-2xx status or success=false."""

    def __init__(self, message: str, *, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ApiClient:
    """Thin HTTP client for the attendance API.

    Every method returns the ``data`` part of the response envelope.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        forwarded_for: Optional[str] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout
        self._forwarded_for = forwarded_for

    @property
    def forwarded_for(self) -> Optional[str]:
        """Browser address passed on as X-Forwarded-For, if any."""
        return self._forwarded_for

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        url = f"{self._base_url}{path}"
        headers = {"X-Forwarded-For": self._forwarded_for} if self._forwarded_for else {}
        try:
            resp = self._session.request(method, url, json=payload, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(f"{method} {path} failed: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        if not resp.ok or not body.get("success"):
            message = body.get("message") or f"{method} {path} returned {resp.status_code}"
            logger.info("%s %s -> %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, status=resp.status_code)

        return body.get("data")

    def login(self, user_id: str, password: str, role: str) -> dict:
        return self._request("POST", "/auth/login", {"userId": user_id, "password": password, "role": role})

    def get_stats(self) -> dict:
        return self._request("GET", "/dashboard/stats")

    def get_students(self) -> list[dict]:
        return self._request("GET", "/students")

    def get_courses(self) -> list[dict]:
        return self._request("GET", "/courses")

    def get_attendance_records(self) -> list[dict]:
        return self._request("GET", "/attendance/records")

    def generate_qr(self, course_id: str) -> dict:
        return self._request("POST", "/attendance/generate-qr", {"courseId": course_id})
