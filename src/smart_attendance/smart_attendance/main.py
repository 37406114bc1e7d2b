from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Callable, Optional
from urllib.parse import urlsplit

from dotenv import load_dotenv
from flask import Blueprint, Flask, request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.exceptions import HTTPException, InternalServerError
from werkzeug.middleware.proxy_fix import ProxyFix

from config import get_settings_module

from .common.responses import fail
from .container import Container, build_container
from .core.constants import API_PREFIX, DEFAULT_QR_EXPIRY_MINUTES
from .attendance.controller import register as register_attendance
from .courses.controller import register as register_courses
from .dashboard.controller import register as register_dashboard
from .health.controller import register as register_health
from .students.controller import register as register_students
from .users.controller import register as register_users
from .web.client import ApiClient
from .web.controller import create_blueprint as create_web_blueprint

logger = logging.getLogger(__name__)

TEMPLATE_FOLDER = "../../../templates"
STATIC_FOLDER = "../../../static"


def _load_settings(settings_module: Optional[str]) -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(settings_module or get_settings_module())


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    # Only show werkzeug warnings and errors
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def _apply_settings(app: Flask, settings: ModuleType) -> None:
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ENVIRONMENT"] = getattr(settings, "ENVIRONMENT", "development")
    app.config["CLIENT_URL"] = getattr(settings, "CLIENT_URL")
    app.config["DATABASE_URI"] = getattr(settings, "DATABASE_URI", "")
    app.config["API_URL"] = getattr(settings, "API_URL")
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))
    app.config["FRONTEND_PORT"] = int(getattr(settings, "FRONTEND_PORT", 3000))
    app.config["QR_EXPIRY_MINUTES"] = int(getattr(settings, "QR_EXPIRY_MINUTES", DEFAULT_QR_EXPIRY_MINUTES))
    app.config["SERVE_FRONTEND"] = bool(getattr(settings, "SERVE_FRONTEND", False))
    app.config["RATE_LIMIT"] = getattr(settings, "RATE_LIMIT", "100 per 15 minutes")
    app.config["RATELIMIT_ENABLED"] = bool(getattr(settings, "RATELIMIT_ENABLED", True))
    app.config["TRUSTED_PROXIES"] = int(getattr(settings, "TRUSTED_PROXIES", 1))
    # Keep the declared field order in JSON responses
    app.json.sort_keys = False


def _describe_database(uri: str) -> str:
    """Host/database part of a connection string, without credentials."""
    parts = urlsplit(uri)
    if not parts.hostname:
        return "<unset>"
    port = f":{parts.port}" if parts.port else ""
    return f"{parts.scheme}://{parts.hostname}{port}{parts.path}"


def _register_security_headers(app: Flask) -> None:
    @app.after_request
    def add_security_headers(response):
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if not app.config["DEBUG"]:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if not request.path.startswith(API_PREFIX):
            return e
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        if not request.path.startswith(API_PREFIX):
            return InternalServerError()
        return fail(str(e), 500)


def _default_api_client_factory(app: Flask) -> Callable[[], ApiClient]:
    base_url = app.config["API_URL"]
    return lambda: ApiClient(base_url, forwarded_for=request.remote_addr)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    """Build the JSON API application."""
    settings = _load_settings(settings_module)
    app = Flask(__name__, template_folder=TEMPLATE_FOLDER, static_folder=STATIC_FOLDER)
    _apply_settings(app, settings)
    _configure_logging(app.config["DEBUG"])

    if app.config["TRUSTED_PROXIES"]:
        # The frontend forwards each browser address, so rate limits stay per browser
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=app.config["TRUSTED_PROXIES"])

    logger.info(
        "settings=%s env=%s client_url=%s db=%s",
        settings.__name__,
        app.config["ENVIRONMENT"],
        app.config["CLIENT_URL"],
        _describe_database(app.config["DATABASE_URI"]),
    )

    CORS(app, resources={rf"{API_PREFIX}/*": {"origins": app.config["CLIENT_URL"]}}, supports_credentials=True)
    Limiter(
        key_func=get_remote_address,
        app=app,
        default_limits=[app.config["RATE_LIMIT"]],
        storage_uri="memory://",
    )
    _register_security_headers(app)
    _register_error_handlers(app)

    container = container or build_container(qr_expiry_minutes=app.config["QR_EXPIRY_MINUTES"])

    api = Blueprint("api", __name__, url_prefix=API_PREFIX)
    register_users(api, container)
    register_dashboard(api, container)
    register_students(api, container)
    register_courses(api, container)
    register_attendance(api, container)
    register_health(api, container)
    app.register_blueprint(api)

    if app.config["SERVE_FRONTEND"]:
        app.register_blueprint(create_web_blueprint(_default_api_client_factory(app)))
        logger.info("frontend mounted at / (api_url=%s)", app.config["API_URL"])

    return app


def create_frontend_app(
    settings_module: Optional[str] = None,
    *,
    api_client_factory: Optional[Callable[[], object]] = None,
) -> Flask:
    """Build the browser frontend, which talks to the API over HTTP."""
    settings = _load_settings(settings_module)
    app = Flask(__name__, template_folder=TEMPLATE_FOLDER, static_folder=STATIC_FOLDER)
    _apply_settings(app, settings)
    _configure_logging(app.config["DEBUG"])
    _register_security_headers(app)

    factory = api_client_factory or _default_api_client_factory(app)
    app.register_blueprint(create_web_blueprint(factory))

    logger.info("frontend settings=%s api_url=%s", settings.__name__, app.config["API_URL"])
    return app
