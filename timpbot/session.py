"""HTTP session factory and status-checked requests."""

import logging
from http.cookiejar import DefaultCookiePolicy
from urllib.parse import urlparse

import requests
import tldextract

from timpbot.config import REQUEST_TIMEOUT, USER_AGENT
from timpbot.exceptions import HTTPStatusError, TransportError

log = logging.getLogger(__name__)

# Bundled public suffix snapshot only, never fetched over the network
_psl = tldextract.TLDExtract(cache_dir=None, suffix_list_urls=(), include_psl_private_domains=True)


def is_public_suffix(domain: str) -> bool:
    """True for domains like "co.uk" or "github.io" that nobody owns."""
    domain = domain.lstrip(".").lower()
    if not domain:
        return False
    ext = _psl(domain)
    return not ext.domain and bool(ext.suffix)


class PublicSuffixCookiePolicy(DefaultCookiePolicy):
    """Refuse cookies scoped to a public suffix.

    A Domain attribute equal to the request host itself is still accepted.
    """

    def set_ok_domain(self, cookie, request):
        if cookie.domain_specified and is_public_suffix(cookie.domain):
            host = urlparse(request.get_full_url()).hostname or ""
            if cookie.domain.lstrip(".").lower() != host.lower():
                log.debug("Rejected cookie %s for public suffix %s", cookie.name, cookie.domain)
                return False
        return super().set_ok_domain(cookie, request)


def new_session() -> requests.Session:
    """A fresh cookie-bearing session for one booking attempt."""
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    session.cookies.set_policy(PublicSuffixCookiePolicy())
    return session


def send(session: requests.Session | None, method: str, url: str, **kwargs) -> requests.Response:
    """Send a request and insist on a 200 answer.

    Without a session the request goes out on its own, carrying no cookies.
    """
    if session is None:
        kwargs.setdefault("headers", {}).setdefault("User-Agent", USER_AGENT)
        requester = requests
    else:
        requester = session
    try:
        resp = requester.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
    except requests.RequestException as e:
        raise TransportError(f"{method} {url} failed: {e}") from e
    if resp.status_code != 200:
        raise HTTPStatusError(resp.status_code, resp.reason, url)
    return resp
