from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_epoch_millis, to_iso_utc


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance summary for one course on one day."""

    work_date: date
    course_id: str
    total_students: int
    present: int

    @property
    def absent(self) -> int:
        return self.total_students - self.present

    @property
    def attendance_rate(self) -> float:
        if not self.total_students:
            return 0.0
        return round(100.0 * self.present / self.total_students, 1)

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "course": self.course_id,
            "totalStudents": self.total_students,
            "present": self.present,
            "absent": self.absent,
            "attendanceRate": self.attendance_rate,
        }


@dataclass(frozen=True)
class QrSession:
    """A generated attendance session. Nothing tracks or checks its expiry."""

    session_id: str
    course_id: Optional[str]
    issued_at: datetime
    expires_at: datetime
    qr_code: str = ""

    @property
    def expires_in(self) -> int:
        return int((self.expires_at - self.issued_at).total_seconds())

    def payload(self) -> str:
        """JSON text encoded into the QR image."""
        return json.dumps(
            {
                "sessionId": self.session_id,
                "courseId": self.course_id,
                "timestamp": to_epoch_millis(self.issued_at),
                "expiry": to_epoch_millis(self.expires_at),
            }
        )

    def to_dict(self) -> dict:
        return {
            "sessionId": self.session_id,
            "qrCode": self.qr_code,
            "expiry": to_iso_utc(self.expires_at),
            "expiresIn": self.expires_in,
        }
