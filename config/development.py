from config.config import (  # noqa: F401
    API_URL,
    CLIENT_URL,
    DATABASE_URI,
    FRONTEND_PORT,
    PORT,
    QR_EXPIRY_MINUTES,
    RATE_LIMIT,
    TRUSTED_PROXIES,
    SECRET_KEY,
)

ENVIRONMENT = "development"

DEBUG = True

RATELIMIT_ENABLED = True

# The frontend runs as its own process (frontend.py)
SERVE_FRONTEND = False
