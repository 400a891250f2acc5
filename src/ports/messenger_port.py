"""Messenger port — abstract interface for sending a text message."""

from __future__ import annotations

from typing import Protocol


class MessengerPort(Protocol):
    """Abstract messaging interface used by the composition root."""

    def send_message(self, text: str) -> None: ...
