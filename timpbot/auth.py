"""Portal login: csrf token from the login page, then session creation."""

import logging

import requests

from timpbot.config import BASE_URL
from timpbot.pages import extract_csrf_token, parse_html
from timpbot.session import send

log = logging.getLogger(__name__)

LOGIN_URL = f"{BASE_URL}/login"
SESSIONS_URL = f"{BASE_URL}/sessions"


def login(session: requests.Session, email: str, password: str) -> None:
    """Log in. Afterwards the session cookies carry the authenticated user."""
    log.info("[2/4] Logging in as %s...", email)
    # GET login page to establish cookies and read the token
    resp = send(session, "GET", LOGIN_URL)
    token = extract_csrf_token(parse_html(resp.text))

    # Multipart form, like the browser sends it
    send(
        session,
        "POST",
        SESSIONS_URL,
        files={
            "authenticity_token": (None, token),
            "email": (None, email),
            "password": (None, password),
            "permanent_session": (None, "0"),
        },
    )
    log.info("  Logged in successfully.")
