from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    """Headline numbers shown on the dashboard cards."""

    total_students: int
    total_courses: int
    today_classes: int
    overall_attendance: float
    active_students: int
    total_faculty: int

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "totalCourses": self.total_courses,
            "todayClasses": self.today_classes,
            "overallAttendance": self.overall_attendance,
            "activeStudents": self.active_students,
            "totalFaculty": self.total_faculty,
        }
