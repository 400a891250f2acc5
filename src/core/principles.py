"""
SOLID Messenger Demo — Principle demonstrations.

This module is the composition root: the only place where concrete
messengers and notifiers are chosen and wired together.

S  Messenger does one thing: write a message.
O  ExtendedMessenger adds behaviour without touching Messenger.
L  DerivedMessenger can replace Messenger; its output keeps Messenger's as a prefix.
I  NotificationPort and AlertPort are separate, so notifying never drags in alerting.
D  InjectedMessenger depends on NotificationPort, not on a concrete notifier.
"""

from __future__ import annotations

import logging
from typing import Callable, TextIO

from src.adapters.console_messenger import (
    DerivedMessenger,
    ExtendedMessenger,
    InjectedMessenger,
    Messenger,
)
from src.adapters.console_notifier import Notifier, TimedNotifier
from src.ports.messenger_port import MessengerPort
from src.ports.notification_port import NotificationPort

logger = logging.getLogger(__name__)

DEMO_MESSAGE = "Test"


def _section(title: str, stream: TextIO | None, body: Callable[[], None]) -> None:
    logger.info("Running demo: %s", title)
    print(f"Example of {title} Principle", file=stream)
    body()
    print("", file=stream)


def demo_single_responsibility(text: str, stream: TextIO | None = None) -> None:
    messenger: MessengerPort = Messenger(stream)
    _section("Single Responsibility", stream, lambda: messenger.send_message(text))


def demo_open_closed(text: str, stream: TextIO | None = None) -> None:
    messenger: MessengerPort = ExtendedMessenger(stream)
    _section("Open Closed", stream, lambda: messenger.send_message(text))


def demo_liskov_substitution(text: str, stream: TextIO | None = None) -> None:
    messenger: MessengerPort = DerivedMessenger(stream)
    _section("Liskov Substitution", stream, lambda: messenger.send_message(text))


def demo_interface_segregation(stream: TextIO | None = None) -> None:
    notifier: NotificationPort = Notifier(stream)
    _section("Interface Segregation", stream, notifier.notify)


def demo_dependency_inversion(
    text: str,
    stream: TextIO | None = None,
    notifier: NotificationPort | None = None,
) -> None:
    """Wire a messenger to a notifier it only knows through NotificationPort.

    Defaults to a TimedNotifier; pass any other NotificationPort to swap it.
    """
    chosen = notifier if notifier is not None else TimedNotifier(stream=stream)
    messenger: MessengerPort = InjectedMessenger(chosen, stream)
    _section("Dependency Inversion", stream, lambda: messenger.send_message(text))


def run_demo(message: str = DEMO_MESSAGE, stream: TextIO | None = None) -> None:
    """Run all five demonstrations in S-O-L-I-D order.

    Args:
        message: Text handed to every messenger.
        stream: Output stream. Defaults to stdout.
    """
    demo_single_responsibility(message, stream)
    demo_open_closed(message, stream)
    demo_liskov_substitution(message, stream)
    demo_interface_segregation(stream)
    demo_dependency_inversion(message, stream)
