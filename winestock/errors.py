"""Domain errors raised by the inventory core.

Every error carries an ``ErrorKind`` so adapters can dispatch on
``error.kind`` instead of walking an exception hierarchy.
"""

import enum


class ErrorKind(str, enum.Enum):
    """Kind of domain rule violation."""

    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_WINE = "DUPLICATE_WINE"
    WINE_NOT_FOUND = "WINE_NOT_FOUND"
    NOT_ENOUGH_STOCK = "NOT_ENOUGH_STOCK"
    INVALID_QUANTITY = "INVALID_QUANTITY"


class InventoryError(Exception):
    """Base error for inventory operations."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class DuplicateIdError(InventoryError):
    """Raised by a store when a record with the same id is already saved."""

    def __init__(self, wine_id: str) -> None:
        super().__init__(ErrorKind.DUPLICATE_ID, f"Record with ID {wine_id} already exists")
        self.wine_id = wine_id


class DuplicateWineError(InventoryError):
    """Raised when registering a wine whose id is already registered."""

    def __init__(self, wine_id: str) -> None:
        super().__init__(
            ErrorKind.DUPLICATE_WINE,
            f"Register failed: wine with ID {wine_id} already exists",
        )
        self.wine_id = wine_id


class WineNotFoundError(InventoryError):
    """Raised when an operation references an unknown wine."""

    def __init__(self, wine_id: str) -> None:
        super().__init__(ErrorKind.WINE_NOT_FOUND, f"Wine with ID {wine_id} not found")
        self.wine_id = wine_id


class NotEnoughStockError(InventoryError):
    """Raised when a retrieve would drive the quantity below zero."""

    def __init__(self, stock_left: int, requested: int | None = None) -> None:
        message = f"Not enough bottles in stock. Available: {stock_left}"
        if requested is not None:
            message += f", Requested: {requested}"
        super().__init__(ErrorKind.NOT_ENOUGH_STOCK, message)
        self.stock_left = stock_left
        self.requested = requested


class InvalidQuantityError(InventoryError):
    """Raised when a stock movement is not a positive number of bottles."""

    def __init__(self, quantity: int) -> None:
        super().__init__(
            ErrorKind.INVALID_QUANTITY,
            f"Quantity must be at least 1, got {quantity}",
        )
        self.quantity = quantity
