from __future__ import annotations

import pytest

from helpers import BASE, FakeSession, html_response, login_page
from timpbot.auth import login
from timpbot.exceptions import HTTPStatusError, TokenNotFoundError


def test_login_posts_credentials_with_token() -> None:
    session = FakeSession({
        ("GET", f"{BASE}/login"): html_response(login_page("tok-1")),
        ("POST", f"{BASE}/sessions"): html_response("welcome"),
    })

    login(session, "a@b.com", "pw")

    assert [(m, u) for m, u, _ in session.calls] == [("GET", f"{BASE}/login"), ("POST", f"{BASE}/sessions")]
    files = session.calls[1][2]["files"]
    assert files == {
        "authenticity_token": (None, "tok-1"),
        "email": (None, "a@b.com"),
        "password": (None, "pw"),
        "permanent_session": (None, "0"),
    }


def test_login_without_token_does_not_post() -> None:
    session = FakeSession({("GET", f"{BASE}/login"): html_response("<html><head></head></html>")})

    with pytest.raises(TokenNotFoundError):
        login(session, "a@b.com", "pw")
    assert len(session.calls) == 1


def test_login_page_error_status() -> None:
    session = FakeSession({("GET", f"{BASE}/login"): html_response(status=503, reason="Service Unavailable")})

    with pytest.raises(HTTPStatusError) as exc_info:
        login(session, "a@b.com", "pw")
    assert exc_info.value.status_code == 503


def test_rejected_credentials() -> None:
    session = FakeSession({
        ("GET", f"{BASE}/login"): html_response(login_page()),
        ("POST", f"{BASE}/sessions"): html_response(status=422, reason="Unprocessable Entity"),
    })

    with pytest.raises(HTTPStatusError) as exc_info:
        login(session, "a@b.com", "wrong")
    assert exc_info.value.status_code == 422
