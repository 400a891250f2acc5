"""Console messenger adapters — implement MessengerPort.

Messenger is the base variant. The other variants never subclass it:
ExtendedMessenger replaces its behaviour outright, while DerivedMessenger and
InjectedMessenger hold a Messenger and call it before adding their own output.
"""

from __future__ import annotations

import logging
from typing import TextIO

from src.ports.notification_port import NotificationPort

logger = logging.getLogger(__name__)

EXTENDED_TEMPLATE = "This is an Extended {text}."
DERIVED_LINE = "Here we can add our own functionality, without affecting the existing code."


class Messenger:
    """Console implementation of MessengerPort: writes the text verbatim."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send_message(self, text: str) -> None:
        print(text, file=self._stream)
        logger.debug("Sent %d chars", len(text))


class ExtendedMessenger:
    """Wraps the text in a fixed sentence instead of writing it raw."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send_message(self, text: str) -> None:
        print(EXTENDED_TEMPLATE.format(text=text), file=self._stream)
        logger.debug("Sent %d chars wrapped", len(text))


class DerivedMessenger:
    """Sends like Messenger, then writes one extra line.

    Whatever Messenger writes for a given text is always the prefix of what
    this class writes, so it can stand in wherever a Messenger is expected.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._base = Messenger(stream)

    def send_message(self, text: str) -> None:
        self._base.send_message(text)
        print(DERIVED_LINE, file=self._stream)
        logger.debug("Sent %d chars plus extra line", len(text))


class InjectedMessenger:
    """Sends like Messenger, then notifies through an injected NotificationPort."""

    def __init__(
        self, notifier: NotificationPort, stream: TextIO | None = None
    ) -> None:
        if notifier is None:
            raise ValueError("InjectedMessenger requires a notifier")
        self._notifier = notifier
        self._base = Messenger(stream)

    @property
    def notifier(self) -> NotificationPort:
        return self._notifier

    def send_message(self, text: str) -> None:
        self._base.send_message(text)
        self._notifier.notify()
        logger.debug(
            "Sent %d chars and notified via %s", len(text), type(self._notifier).__name__
        )
