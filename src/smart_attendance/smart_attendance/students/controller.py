from __future__ import annotations

from flask import Blueprint

from ..common.responses import ok
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    @bp.route("/students", methods=["GET"], endpoint="students")
    def students():
        return ok(container.student_service.list_students())
