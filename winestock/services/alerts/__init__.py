"""Alert sink module for WineStock."""

from winestock.services.alerts.base import AlertSink, get_alert_sink
from winestock.services.alerts.console import ConsoleAlertSink
from winestock.services.alerts.log import LogAlertSink

__all__ = [
    "AlertSink",
    "ConsoleAlertSink",
    "LogAlertSink",
    "get_alert_sink",
]
