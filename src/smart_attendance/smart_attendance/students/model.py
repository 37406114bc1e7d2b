from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: a student row as listed by the API."""

    student_id: str
    name: str
    email: str
    program: str
    year: str
    attendance: float

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "email": self.email,
            "program": self.program,
            "year": self.year,
            "attendance": self.attendance,
        }
