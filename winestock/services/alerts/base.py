"""Base alert sink and factory."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from winestock.config import Settings


class AlertSink(ABC):
    """Abstract base class for alert delivery channels.

    Delivery is fire-and-forget; callers must not let a failing sink abort
    the operation that triggered the alert.
    """

    @abstractmethod
    def send_alert(self, message: str) -> None:
        """Deliver an alert message.

        Args:
            message: Human-readable alert text.
        """


def get_alert_sink(settings: "Settings | None" = None) -> AlertSink:
    """Get the configured alert sink instance.

    Args:
        settings: Optional settings. Defaults to the global settings.

    Returns:
        AlertSink instance based on settings.
    """
    if settings is None:
        from winestock.config import get_settings

        settings = get_settings()

    if settings.alert_backend == "log":
        from winestock.services.alerts.log import LogAlertSink

        return LogAlertSink()
    else:
        from winestock.services.alerts.console import ConsoleAlertSink

        return ConsoleAlertSink()
