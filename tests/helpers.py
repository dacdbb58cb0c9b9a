from __future__ import annotations

from http.client import HTTPMessage

import requests
from requests.adapters import BaseAdapter

BASE = "https://connect.timp.pro"


def html_response(body: str = "", status: int = 200, reason: str = "OK", url: str = BASE) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp.url = url
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


def login_page(token: str = "login-token") -> str:
    return f'<html><head><meta name="csrf-token" content="{token}"></head><body><form></form></body></html>'


def admissions_page(active_date: str = "2024-05-01", slots: dict[str, str] | None = None,
                    token: str | None = "page-token") -> str:
    # slots: hour label -> slot id, rendered in insertion order
    meta = f'<meta name="csrf-token" content="{token}">' if token is not None else ""
    links = "".join(
        f'<a class="text-decoration-none text-reset" href="/admissions/{slot_id}/">'
        f'<div class="card"><div class="p-3 text-center"><div>{hour}</div><small>5 places</small></div></div>'
        f"</a>"
        for hour, slot_id in (slots or {}).items()
    )
    return (
        f"<html><head>{meta}</head><body>"
        f'<a class="date" href="/C1/activities/AC1/admissions?date=2024-04-30">30</a>'
        f'<a class="date date-active" href="/C1/activities/AC1/admissions?date={active_date}">1</a>'
        f"{links}</body></html>"
    )


class FakeSession:
    """Stands in for requests.Session (or the requests module) and records calls."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        resp = self.routes.get((method, url))
        if resp is None:
            return html_response(status=404, reason="Not Found", url=url)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


class _RawResponse:
    # The parts of a urllib3 response that requests reads cookies from
    def __init__(self, headers: dict[str, str]):
        msg = HTTPMessage()
        for name, value in headers.items():
            msg[name] = value
        self._original_response = type("Original", (), {"msg": msg})()


class RecordingAdapter(BaseAdapter):
    """Transport for a real requests.Session: canned answers, recorded requests."""

    def __init__(self, routes: dict[tuple[str, str], dict[str, str]]):
        super().__init__()
        self.routes = routes  # (method, url) -> response headers
        self.requests = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        resp = requests.Response()
        resp.status_code = 200
        resp.reason = "OK"
        resp.url = request.url
        resp.request = request
        resp._content = b"<html></html>"
        resp.encoding = "utf-8"
        resp.raw = _RawResponse(self.routes.get((request.method, request.url), {}))
        return resp

    def close(self):
        pass
