from __future__ import annotations

import logging

from flask import Blueprint

from ..common.responses import fail, json_body, ok
from ..core.exceptions import AuthenticationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(bp: Blueprint, container: Container) -> None:
    @bp.route("/auth/login", methods=["POST"], endpoint="login")
    @bp.route("/login", methods=["POST"], endpoint="login_alias")
    def login():
        try:
            data = json_body()
            result = container.auth_service.authenticate(
                data.get("userId"),
                data.get("password"),
                data.get("role"),
            )
            return ok(result.to_dict())
        except AuthenticationError as e:
            return fail(str(e), 401)
        except Exception as e:
            logger.exception("login failed")
            return fail(str(e), 500)
