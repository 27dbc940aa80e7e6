"""Console alert sink."""

import sys
from typing import TextIO

from winestock.services.alerts.base import AlertSink


class ConsoleAlertSink(AlertSink):
    """Alert sink that prints alerts to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send_alert(self, message: str) -> None:
        print(f"[ALERT] {message}", file=self._stream or sys.stdout, flush=True)
