from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingRequest:
    """What to book. All ids are opaque strings in the portal."""

    center: str
    activity: str
    date: str  # yyyy-mm-dd
    hour: str  # hh:mm, compared as display text


@dataclass(frozen=True)
class Slot:
    slot_id: str
    label: str
