from __future__ import annotations

from typing import Protocol, Sequence

from .model import CourseRecord


class CourseRepository(Protocol):
    def list_all(self) -> Sequence[CourseRecord]:
        raise NotImplementedError


class FixtureCourseRepository:
    """Serves the fixed demo course catalogue."""

    def __init__(self, courses: Sequence[CourseRecord] | None = None):
        self._courses = tuple(courses if courses is not None else DEMO_COURSES)

    def list_all(self) -> Sequence[CourseRecord]:
        return list(self._courses)


DEMO_COURSES: tuple[CourseRecord, ...] = (
    CourseRecord(
        course_id="CS101",
        name="Introduction to Programming",
        department="Computer Science",
        faculty="Dr. Michael Chen",
        schedule="Mon-Wed-Fri 9:00 AM",
        room="Lab A1",
        enrolled=45,
    ),
    CourseRecord(
        course_id="ENG101",
        name="Engineering Mathematics",
        department="Engineering",
        faculty="Prof. Sarah Williams",
        schedule="Tue-Thu 11:00 AM",
        room="Room 301",
        enrolled=52,
    ),
)
