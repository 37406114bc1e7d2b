from __future__ import annotations

from typing import Protocol, Sequence

from .model import StudentRecord


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[StudentRecord]:
        raise NotImplementedError


class FixtureStudentRepository:
    """Serves the fixed demo roster."""

    def __init__(self, students: Sequence[StudentRecord] | None = None):
        self._students = tuple(students if students is not None else DEMO_STUDENTS)

    def list_all(self) -> Sequence[StudentRecord]:
        return list(self._students)


DEMO_STUDENTS: tuple[StudentRecord, ...] = (
    StudentRecord(
        student_id="ST001",
        name="Alice Johnson",
        email="alice@college.edu",
        program="Computer Science",
        year="2nd Year",
        attendance=95.5,
    ),
    StudentRecord(
        student_id="ST002",
        name="Bob Smith",
        email="bob@college.edu",
        program="Engineering",
        year="3rd Year",
        attendance=88.2,
    ),
    StudentRecord(
        student_id="ST003",
        name="Carol Davis",
        email="carol@college.edu",
        program="Business",
        year="1st Year",
        attendance=92.1,
    ),
)
