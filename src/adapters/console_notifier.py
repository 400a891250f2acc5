"""Console notification adapters — implement NotificationPort.

Notifier writes a fixed token. TimedNotifier wraps a Notifier (by holding it,
not by subclassing it) and brackets each notification with timestamps.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta
from typing import Callable, TextIO

logger = logging.getLogger(__name__)

NOTIFY_TOKEN = "Pop!"


def format_timestamp(moment: datetime) -> str:
    """Format as YYYY-MM-DD HH:MM:SS.mmm (millisecond precision)."""
    return moment.strftime("%Y-%m-%d %H:%M:%S.") + f"{moment.microsecond // 1000:03d}"


class Notifier:
    """Console implementation of NotificationPort."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self) -> None:
        print(NOTIFY_TOKEN, file=self._stream)
        logger.debug("Notified: %s", NOTIFY_TOKEN)


class TimedNotifier:
    """NotificationPort that logs when the wrapped notifier starts and finishes.

    The start time comes from the wall clock; the finish time is the start time
    plus the elapsed monotonic time, so it can never precede the start.
    """

    def __init__(
        self,
        notifier: Notifier | None = None,
        clock: Callable[[], datetime] = datetime.now,
        stream: TextIO | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._stream = stream
        self._notifier = notifier if notifier is not None else Notifier(stream)
        self._clock = clock
        self._monotonic = monotonic

    def notify(self) -> None:
        started = self._clock()
        tick = self._monotonic()
        print(f"Notify started at {format_timestamp(started)}.", file=self._stream)

        self._notifier.notify()

        elapsed = timedelta(seconds=self._monotonic() - tick)
        finished = started + elapsed
        print(f"Notify finished at {format_timestamp(finished)}.", file=self._stream)
        logger.debug("Timed notify took %s", elapsed)
