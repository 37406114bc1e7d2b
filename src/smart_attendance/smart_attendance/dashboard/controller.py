from __future__ import annotations

from flask import Blueprint

from ..common.responses import ok
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    @bp.route("/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return ok(container.dashboard_service.get_stats().to_dict())
