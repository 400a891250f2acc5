"""Alert port — abstract interface for raising an alert.

Kept separate from NotificationPort: a client that only needs to notify
does not have to depend on alerting.
"""

from __future__ import annotations

from typing import Protocol


class AlertPort(Protocol):
    """Abstract alert interface."""

    def create_alert(self) -> None: ...
