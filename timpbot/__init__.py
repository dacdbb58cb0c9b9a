"""TIMP connect reservation bot."""

from timpbot.booking import book, book_until_success
from timpbot.domain import BookingRequest, Slot
from timpbot.exceptions import BookingError

__all__ = [
    "BookingError",
    "BookingRequest",
    "Slot",
    "book",
    "book_until_success",
]
