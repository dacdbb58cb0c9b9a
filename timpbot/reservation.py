"""Reservation logic: check the date, find the slot, book it."""

import logging

import requests

from timpbot.config import BASE_URL
from timpbot.exceptions import DateNotOfferedError, SlotNotFoundError
from timpbot.pages import extract_active_date, extract_csrf_token, extract_slots, match_slot, parse_html
from timpbot.session import send

log = logging.getLogger(__name__)


def admissions_url(center: str, activity: str, date: str) -> str:
    return f"{BASE_URL}/{center}/activities/{activity}/admissions?date={date}"


def tickets_url(slot_id: str, center: str) -> str:
    return f"{BASE_URL}/admissions/{slot_id}/tickets?branch_building_id={center}"


def check_date(center: str, activity: str, date: str) -> None:
    """Make sure the activity is open for booking on date.

    Uses a request of its own, without any session cookies.
    """
    log.info("[1/4] Checking date %s for activity %s at center %s...", date, activity, center)
    resp = send(None, "GET", admissions_url(center, activity, date))
    active_date = extract_active_date(parse_html(resp.text))
    if active_date != date:
        raise DateNotOfferedError(date, active_date)
    log.info("  Date %s is open.", date)


def find_slot(
    session: requests.Session, center: str, activity: str, date: str, hour: str,
) -> tuple[str, str]:
    """Find the slot starting at hour. Returns (slot_id, csrf_token).

    The token comes from the same page and is needed to book the slot.
    """
    log.info("[3/4] Looking for slot %s %s...", date, hour)
    resp = send(session, "GET", admissions_url(center, activity, date))
    soup = parse_html(resp.text)
    token = extract_csrf_token(soup)

    slots = extract_slots(soup)
    slot = match_slot(slots, hour)
    if slot is None:
        raise SlotNotFoundError(hour, [s.label for s in slots])
    log.info("  Found slot %s (ID=%s).", slot.label, slot.slot_id)
    return slot.slot_id, token


def submit_booking(session: requests.Session, slot_id: str, center: str, token: str) -> None:
    """Book the slot. Success is judged by the status code alone."""
    log.info("[4/4] Booking slot %s...", slot_id)
    # The portal wants the token both as form field and as header
    send(
        session,
        "POST",
        tickets_url(slot_id, center),
        files={"X-CSRF-Token": (None, token)},
        headers={"X-CSRF-Token": token},
    )
    log.info("  Booking accepted.")
