from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .attendance.repository import FixtureAttendanceRepository
from .attendance.service import AttendanceService, QrSessionService
from .common.datetime_utils import now_utc
from .core.constants import DEFAULT_QR_EXPIRY_MINUTES
from .courses.repository import FixtureCourseRepository
from .courses.service import CourseService
from .dashboard.service import DashboardService
from .students.repository import FixtureStudentRepository
from .students.service import StudentService
from .users.demo_account_repository import DemoAccountRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    clock: Callable[[], datetime]

    accounts_repo: DemoAccountRepository
    students_repo: FixtureStudentRepository
    courses_repo: FixtureCourseRepository
    attendance_repo: FixtureAttendanceRepository

    auth_service: AuthService
    dashboard_service: DashboardService
    student_service: StudentService
    course_service: CourseService
    attendance_service: AttendanceService
    qr_service: QrSessionService


def build_container(
    *,
    qr_expiry_minutes: int = DEFAULT_QR_EXPIRY_MINUTES,
    clock: Callable[[], datetime] = now_utc,
) -> Container:
    accounts_repo = DemoAccountRepository()
    students_repo = FixtureStudentRepository()
    courses_repo = FixtureCourseRepository()
    attendance_repo = FixtureAttendanceRepository()

    return Container(
        clock=clock,
        accounts_repo=accounts_repo,
        students_repo=students_repo,
        courses_repo=courses_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(accounts_repo),
        dashboard_service=DashboardService(),
        student_service=StudentService(students_repo),
        course_service=CourseService(courses_repo),
        attendance_service=AttendanceService(attendance_repo),
        qr_service=QrSessionService(expiry_minutes=qr_expiry_minutes, clock=clock),
    )
