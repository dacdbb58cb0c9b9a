"""Custom exceptions for the TIMP reservation bot."""


class BookingError(Exception):
    """Raised when a booking attempt fails. The whole attempt can be retried."""


class HTTPStatusError(BookingError):
    """The portal answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str, url: str):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"status code error: {status_code} {reason} ({url})")


class TransportError(BookingError):
    """The request never got a response (DNS, refused connection, timeout)."""


class ParseError(BookingError):
    """The response body could not be parsed as HTML."""


class TokenNotFoundError(BookingError):
    """The page carries no csrf-token meta tag."""


class DateNotOfferedError(BookingError):
    def __init__(self, date: str, active_date: str | None):
        self.date = date
        self.active_date = active_date
        super().__init__(f"date {date} not found (active date: {active_date or 'none'})")


class SlotNotFoundError(BookingError):
    def __init__(self, hour: str, offered: list[str]):
        self.hour = hour
        self.offered = offered
        available = ", ".join(offered) if offered else "none"
        super().__init__(f"no slot at {hour}. Available: {available}")
