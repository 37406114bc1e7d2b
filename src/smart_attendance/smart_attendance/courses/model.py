from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CourseRecord:
    """Domain entity: a course with its faculty and schedule."""

    course_id: str
    name: str
    department: str
    faculty: str
    schedule: str
    room: str
    enrolled: int

    def to_dict(self) -> dict:
        return {
            "id": self.course_id,
            "name": self.name,
            "department": self.department,
            "faculty": self.faculty,
            "schedule": self.schedule,
            "room": self.room,
            "enrolled": self.enrolled,
        }
