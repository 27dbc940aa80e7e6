"""Low-stock alert use case."""

import logging

from winestock.services.alerts.base import AlertSink
from winestock.services.store.base import WineStore

logger = logging.getLogger(__name__)

DEFAULT_LOW_STOCK_THRESHOLD = 5


class CheckLowStockUseCase:
    """Raise an alert when a wine's stock is at or below a threshold."""

    def __init__(
        self,
        store: WineStore,
        alert_sink: AlertSink,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self.store = store
        self.alert_sink = alert_sink
        self.low_stock_threshold = low_stock_threshold

    def execute(self, wine_id: str) -> bool:
        """Check a wine's current stock and alert if it is low.

        A wine that no longer exists is skipped. Failures in the alert sink
        are logged and never propagate to the caller.

        Args:
            wine_id: Id of the wine to check.

        Returns:
            True if an alert was raised.
        """
        wine = self.store.find_by_id(wine_id)
        if wine is None:
            logger.debug("Low-stock check skipped, wine %s no longer exists", wine_id)
            return False

        if wine.quantity > self.low_stock_threshold:
            return False

        message = f"Low stock alert: {wine} (threshold {self.low_stock_threshold})"
        try:
            self.alert_sink.send_alert(message)
        except Exception:
            logger.exception("Alert sink failed for wine %s", wine_id)
        return True
