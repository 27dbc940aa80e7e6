"""Services for WineStock."""

from winestock.services.inventory import InventoryService, create_inventory_service
from winestock.services.low_stock import CheckLowStockUseCase

__all__ = [
    "CheckLowStockUseCase",
    "InventoryService",
    "create_inventory_service",
]
