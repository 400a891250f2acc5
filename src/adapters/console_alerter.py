"""Console alert adapter — implements AlertPort."""

from __future__ import annotations

import logging
from typing import TextIO

logger = logging.getLogger(__name__)

ALERT_TOKEN = "Alert!"


class Alerter:
    """Console implementation of AlertPort."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def create_alert(self) -> None:
        print(ALERT_TOKEN, file=self._stream)
        logger.debug("Alerted: %s", ALERT_TOKEN)
