"""APScheduler integration for delayed starts."""

import logging
import threading
from datetime import datetime

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger

log = logging.getLogger(__name__)


def run_at(when: datetime, func, *args):
    """Run func(*args) once at `when`, blocking until it has finished.

    Returns what func returns and re-raises what it raises. A time in the
    past runs right away.
    """
    scheduler = BackgroundScheduler()
    finished = threading.Event()
    outcome = {}

    def _done(event):
        if event.exception is not None:
            outcome["error"] = event.exception
        else:
            outcome["result"] = event.retval
        finished.set()

    scheduler.add_listener(_done, EVENT_JOB_EXECUTED | EVENT_JOB_ERROR)
    scheduler.add_job(
        func,
        trigger=DateTrigger(run_date=when),
        args=list(args),
        id="delayed_start",
        misfire_grace_time=None,
    )
    log.info("Waiting until %s to start.", when)
    scheduler.start()
    try:
        finished.wait()
    finally:
        scheduler.shutdown(wait=False)

    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("result")
