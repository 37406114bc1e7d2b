from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_utc, to_epoch_millis
from ..core.constants import DEFAULT_QR_EXPIRY_MINUTES, QR_SESSION_PREFIX
from .model import QrSession
from .qr import encode_data_uri
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, records: AttendanceRepository):
        self._records = records

    def list_records(self) -> list[dict]:
        return [r.to_dict() for r in self._records.list_recent()]


class QrSessionService:
    """Use case: issue a QR attendance session for a course.

    The clock is read once per session so ``expiry - timestamp`` is exactly the
    configured lifetime.
    """

    def __init__(
        self,
        *,
        expiry_minutes: int = DEFAULT_QR_EXPIRY_MINUTES,
        clock: Callable[[], datetime] = now_utc,
        encoder: Callable[[str], str] = encode_data_uri,
    ):
        self._ttl = timedelta(minutes=int(expiry_minutes))
        self._clock = clock
        self._encoder = encoder

    def generate(self, course_id: Optional[str]) -> QrSession:
        now = self._clock()
        session = QrSession(
            session_id=f"{QR_SESSION_PREFIX}{to_epoch_millis(now)}",
            course_id=course_id,
            issued_at=now,
            expires_at=now + self._ttl,
        )
        session = replace(session, qr_code=self._encoder(session.payload()))
        logger.info("qr session %s issued for course=%r", session.session_id, course_id)
        return session
