from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ..common.datetime_utils import to_iso_utc
from ..container import Container


def register(bp: Blueprint, container: Container) -> None:
    @bp.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify(
            {
                "success": True,
                "status": "OK",
                "timestamp": to_iso_utc(container.clock()),
                "environment": current_app.config.get("ENVIRONMENT", "development"),
            }
        )
