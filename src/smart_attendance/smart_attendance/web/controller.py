from __future__ import annotations

import logging
from typing import Callable

from flask import Blueprint, flash, redirect, render_template, request, session, url_for

from ..core.enums import Role
from ..users.model import SessionUser
from .client import ApiClient, ApiError
from .state import ClientApplication
from .views import attendance_badge, dashboard_title, demo_credentials

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"


def create_blueprint(api_factory: Callable[[], ApiClient]) -> Blueprint:
    bp = Blueprint("web", __name__)

    def _client_app() -> ClientApplication:
        # The user lives in the browser's signed session cookie
        raw = session.get(SESSION_USER_KEY)
        user = SessionUser.from_dict(raw) if raw else None
        return ClientApplication(api_factory(), current_user=user)

    @bp.route("/", methods=["GET"], endpoint="index")
    def index():
        client = _client_app()
        user = client.current_user
        if user is None:
            return render_template("login.html", roles=list(Role), demo_accounts=demo_credentials())

        try:
            view = client.load_dashboard()
        except ApiError as e:
            logger.warning("dashboard load failed: %s", e)
            flash("Failed to fetch data", "error")
            view = None

        return render_template(
            "dashboard.html",
            user=user,
            title=dashboard_title(user.role),
            view=view,
            badge=attendance_badge,
        )

    @bp.route("/login", methods=["POST"], endpoint="login")
    def login():
        client = _client_app()
        try:
            user = client.login(
                request.form.get("userId", "").strip(),
                request.form.get("password", ""),
                request.form.get("role", ""),
            )
            session[SESSION_USER_KEY] = user.to_dict()
            flash("Login successful!", "success")
        except ApiError as e:
            logger.info("login failed: %s", e)
            flash("Login failed. Try demo credentials.", "error")
        return redirect(url_for("web.index"))

    @bp.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        client = _client_app()
        client.logout()
        session.pop(SESSION_USER_KEY, None)
        return redirect(url_for("web.index"))

    return bp
