from config.config import (  # noqa: F401
    CLIENT_URL,
    DATABASE_URI,
    FRONTEND_PORT,
    PORT,
    QR_EXPIRY_MINUTES,
    RATE_LIMIT,
    TRUSTED_PROXIES,
)

ENVIRONMENT = "testing"

SECRET_KEY = "test-secret"

API_URL = "http://api.test/api"

DEBUG = False
TESTING = True

RATELIMIT_ENABLED = False

SERVE_FRONTEND = False
