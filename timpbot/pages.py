"""Page scraping: selectors and extraction over parsed HTML.

The portal markup is outside our control, so every selector lives here as a
named constant.
"""

import logging

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from timpbot.domain import Slot
from timpbot.exceptions import ParseError, TokenNotFoundError

log = logging.getLogger(__name__)

CSRF_META_NAME = "csrf-token"
ACTIVE_DATE_SELECTOR = "a.date-active"
SLOT_LINK_SELECTOR = "a.text-decoration-none.text-reset"
SLOT_LABEL_CONTAINER_SELECTOR = "div.p-3.text-center"
SLOT_LABEL_TAG = "div"


def parse_html(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseError(f"could not parse page: {e}") from e


def extract_csrf_token(soup: BeautifulSoup) -> str:
    """Return the content of <meta name="csrf-token">. Last tag wins."""
    token = ""
    for meta in soup.find_all("meta"):
        if meta.get("name") == CSRF_META_NAME:
            token = meta.get("content", "")
    if not token:
        raise TokenNotFoundError("csrf-token not found")
    return token


def extract_active_date(soup: BeautifulSoup) -> str | None:
    """Date of the highlighted day in the date strip, e.g. "2024-05-01".

    The value sits after the first "=" of the link (".../admissions?date=...").
    If several links are highlighted the last one counts.
    """
    active_date = None
    for link in soup.select(ACTIVE_DATE_SELECTOR):
        parts = link.get("href", "").split("=")
        if len(parts) < 2:
            continue
        active_date = parts[1]
    return active_date


def extract_slots(soup: BeautifulSoup) -> list[Slot]:
    """All bookable slots in document order.

    Slot links look like "/admissions/<id>" and contain the hour label in the
    first <div> of a "p-3 text-center" box.
    """
    slots = []
    for link in soup.select(SLOT_LINK_SELECTOR):
        segments = link.get("href", "").strip("/").split("/")
        if len(segments) != 2:
            continue
        slot_id = segments[1]
        for container in link.select(SLOT_LABEL_CONTAINER_SELECTOR):
            label = container.find(SLOT_LABEL_TAG)
            if label is None:
                continue
            slots.append(Slot(slot_id=slot_id, label=label.get_text()))
    log.debug("Parsed %d slots", len(slots))
    return slots


def match_slot(slots: list[Slot], hour: str) -> Slot | None:
    """Slot whose label equals hour exactly. The last match wins."""
    found = None
    for slot in slots:
        if slot.label == hour:
            found = slot
    return found
