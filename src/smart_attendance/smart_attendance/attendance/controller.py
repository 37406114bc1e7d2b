from __future__ import annotations

import logging

from flask import Blueprint

from ..common.responses import fail, json_body, ok
from ..container import Container

logger = logging.getLogger(__name__)


def register(bp: Blueprint, container: Container) -> None:
    @bp.route("/attendance/records", methods=["GET"], endpoint="attendance_records")
    def attendance_records():
        return ok(container.attendance_service.list_records())

    @bp.route("/attendance/generate-qr", methods=["POST"], endpoint="generate_qr")
    def generate_qr():
        """Issue a QR code for a course session; the expiry is informational."""
        try:
            course_id = json_body().get("courseId")
            session = container.qr_service.generate(course_id)
            return ok(session.to_dict())
        except Exception as e:
            logger.exception("qr generation failed")
            return fail(str(e), 500)
