import os

from config.config import (  # noqa: F401
    API_URL,
    CLIENT_URL,
    DATABASE_URI,
    FRONTEND_PORT,
    PORT,
    QR_EXPIRY_MINUTES,
    RATE_LIMIT,
    TRUSTED_PROXIES,
)

ENVIRONMENT = "production"

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

RATELIMIT_ENABLED = True

# Production serves the UI from the API process
SERVE_FRONTEND = True
