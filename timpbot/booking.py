"""Booking orchestrator and the retry loop around it."""

import logging
import time

from timpbot.auth import login
from timpbot.config import RETRY_DELAY
from timpbot.domain import BookingRequest
from timpbot.exceptions import BookingError
from timpbot.reservation import check_date, find_slot, submit_booking
from timpbot.session import new_session

log = logging.getLogger(__name__)


def book(email: str, password: str, center: str, activity: str, date: str, hour: str) -> None:
    """Run one full booking attempt.

    Raises BookingError (or a subclass) as soon as any step fails. Nothing is
    retried here; a fresh session is used on every call.
    """
    check_date(center, activity, date)

    with new_session() as session:
        login(session, email, password)
        slot_id, token = find_slot(session, center, activity, date, hour)
        submit_booking(session, slot_id, center, token)


def book_until_success(email: str, password: str, request: BookingRequest,
                       delay: float = RETRY_DELAY, sleep=time.sleep) -> int:
    """Repeat book() every `delay` seconds until it succeeds.

    There is no attempt limit. Returns the number of attempts it took.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            book(email, password, request.center, request.activity, request.date, request.hour)
        except BookingError as e:
            log.warning("Attempt %d failed: %s. Retrying in %gs...", attempt, e, delay)
            sleep(delay)
            continue
        log.info("%s %s %s DONE!", email, request.date, request.hour)
        return attempt
