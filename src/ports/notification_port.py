"""Notification port — abstract interface for emitting a notification.

Messengers that notify depend on this protocol, never on a concrete notifier.
"""

from __future__ import annotations

from typing import Protocol


class NotificationPort(Protocol):
    """Abstract notification interface."""

    def notify(self) -> None: ...
