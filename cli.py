#!/usr/bin/env python3
"""TIMP connect reservation bot."""

import argparse
import logging
import sys
from datetime import datetime

from timpbot import config
from timpbot.booking import book_until_success
from timpbot.domain import BookingRequest
from timpbot.scheduler import run_at


def _non_negative_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return seconds


def _parse_start_at(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO date/time: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Book a TIMP activity slot, retrying until it succeeds.",
    )
    parser.add_argument("--email", default=config.EMAIL, help="user email (default: $TIMP_EMAIL)")
    parser.add_argument("--pass", dest="password", default=config.PASSWORD,
                        help="user password (default: $TIMP_PASSWORD)")
    parser.add_argument("--center", default="", help="numeric id of the center")
    parser.add_argument("--activity", default="", help="numeric id of the activity")
    parser.add_argument("--date", default="", help="date of the reservation (yyyy-mm-dd)")
    parser.add_argument("--hour", default="", help="hour of the reservation (hh:mm)")
    parser.add_argument(
        "--retry-delay",
        type=_non_negative_float,
        default=config.RETRY_DELAY,
        help=f"seconds between attempts (default: {config.RETRY_DELAY:g})",
    )
    parser.add_argument(
        "--start-at",
        type=_parse_start_at,
        help='wait until this time before the first attempt (e.g. "2024-05-01T00:00:00")',
    )
    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    for name, flag in (("email", "email"), ("password", "pass"), ("center", "center"),
                       ("activity", "activity"), ("date", "date"), ("hour", "hour")):
        if not getattr(args, name):
            parser.error(f"{flag} not provided")

    request = BookingRequest(center=args.center, activity=args.activity, date=args.date, hour=args.hour)
    if args.start_at is not None:
        run_at(args.start_at, book_until_success, args.email, args.password, request, args.retry_delay)
    else:
        book_until_success(args.email, args.password, request, delay=args.retry_delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())
