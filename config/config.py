import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "smart-attendance-dev-key"

    # Frontend origin allowed by CORS
    CLIENT_URL = os.environ.get("CLIENT_URL", "http://localhost:3000")

    # Recorded for startup logging; the API serves fixtures only
    DATABASE_URI = os.environ.get("DATABASE_URI", "mongodb://localhost:27017/attendance")

    PORT = int(os.environ.get("PORT", "5000"))
    FRONTEND_PORT = int(os.environ.get("FRONTEND_PORT", "3000"))
    API_URL = os.environ.get("API_URL", f"http://localhost:{PORT}/api")

    RATE_LIMIT = os.environ.get("RATE_LIMIT", "100 per 15 minutes")

    # X-Forwarded-For hops trusted when keying the rate limit (the frontend is one hop)
    TRUSTED_PROXIES = int(os.environ.get("TRUSTED_PROXIES", "1"))
    QR_EXPIRY_MINUTES = 5


# Module-level names read by create_app()
SECRET_KEY = Config.SECRET_KEY
CLIENT_URL = Config.CLIENT_URL
DATABASE_URI = Config.DATABASE_URI
PORT = Config.PORT
FRONTEND_PORT = Config.FRONTEND_PORT
API_URL = Config.API_URL
RATE_LIMIT = Config.RATE_LIMIT
TRUSTED_PROXIES = Config.TRUSTED_PROXIES
QR_EXPIRY_MINUTES = Config.QR_EXPIRY_MINUTES
