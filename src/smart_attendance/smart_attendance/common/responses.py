from __future__ import annotations

from typing import Any

from flask import jsonify, request


def ok(data: Any = None, status: int = 200):
    """Success envelope: {"success": true, "data": ...}."""
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(message: str, status: int):
    """Failure envelope: {"success": false, "message": ...}."""
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    """Request JSON as a dict; missing, malformed or non-object bodies read as {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
