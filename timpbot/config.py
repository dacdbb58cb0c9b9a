"""Settings read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv

load_dotenv()

BASE_URL = os.getenv("TIMP_BASE_URL", "https://connect.timp.pro").rstrip("/")
USER_AGENT = os.getenv("TIMP_USER_AGENT", "Mozilla/5.0")

# Credentials are optional here; the CLI flags take precedence.
EMAIL = os.getenv("TIMP_EMAIL", "")
PASSWORD = os.getenv("TIMP_PASSWORD", "")

RETRY_DELAY = float(os.getenv("TIMP_RETRY_DELAY", "5"))  # seconds between attempts

# No explicit timeout unless configured
_timeout = os.getenv("TIMP_REQUEST_TIMEOUT")
REQUEST_TIMEOUT = float(_timeout) if _timeout else None
