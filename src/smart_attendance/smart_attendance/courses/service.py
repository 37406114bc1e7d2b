from __future__ import annotations

from .repository import CourseRepository


class CourseService:
    def __init__(self, courses: CourseRepository):
        self._courses = courses

    def list_courses(self) -> list[dict]:
        return [c.to_dict() for c in self._courses.list_all()]
