from __future__ import annotations

from .model import DashboardStats


DEFAULT_STATS = DashboardStats(
    total_students=1250,
    total_courses=156,
    today_classes=23,
    overall_attendance=94.2,
    active_students=1180,
    total_faculty=85,
)


class DashboardService:
    def __init__(self, stats: DashboardStats = DEFAULT_STATS):
        self._stats = stats

    def get_stats(self) -> DashboardStats:
        return self._stats
