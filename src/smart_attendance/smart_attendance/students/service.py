from __future__ import annotations

from .repository import StudentRepository


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def list_students(self) -> list[dict]:
        return [s.to_dict() for s in self._students.list_all()]
