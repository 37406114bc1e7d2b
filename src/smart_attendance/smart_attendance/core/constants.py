"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

API_PREFIX = "/api"

DEMO_PASSWORD = "demo123"
DEMO_TOKEN = "demo-jwt-token"

QR_SESSION_PREFIX = "SESSION_"
DEFAULT_QR_EXPIRY_MINUTES = 5

# Attendance badge thresholds (percent)
GOOD_ATTENDANCE = 90
WARNING_ATTENDANCE = 75
