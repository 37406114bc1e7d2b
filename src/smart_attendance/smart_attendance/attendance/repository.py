from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Repository interface for attendance summaries (newest first)."""

    def list_recent(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class FixtureAttendanceRepository:
    def __init__(self, records: Sequence[AttendanceRecord] | None = None):
        self._records = tuple(records if records is not None else DEMO_RECORDS)

    def list_recent(self) -> Sequence[AttendanceRecord]:
        return sorted(self._records, key=lambda r: r.work_date, reverse=True)


DEMO_RECORDS: tuple[AttendanceRecord, ...] = (
    AttendanceRecord(work_date=date(2024, 9, 2), course_id="CS101", total_students=45, present=43),
    AttendanceRecord(work_date=date(2024, 9, 1), course_id="CS101", total_students=45, present=41),
)
