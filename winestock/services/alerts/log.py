"""Logging alert sink."""

import logging

from winestock.services.alerts.base import AlertSink

logger = logging.getLogger(__name__)


class LogAlertSink(AlertSink):
    """Alert sink that emits alerts as log records.

    Useful when alerts should follow the application's logging handlers
    instead of going straight to the terminal.
    """

    def __init__(self, level: int = logging.WARNING) -> None:
        """Initialize the sink.

        Args:
            level: Log level used for alert records.
        """
        self.level = level
        logger.info("Using log alert backend (alerts will be logged, not printed)")

    def send_alert(self, message: str) -> None:
        logger.log(self.level, "ALERT: %s", message)
