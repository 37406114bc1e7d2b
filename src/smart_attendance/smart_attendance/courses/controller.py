from __future__ import annotations

from flask import Blueprint

from ..common.responses import ok
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    @bp.route("/courses", methods=["GET"], endpoint="courses")
    def courses():
        return ok(container.course_service.list_courses())
