"""Bookstore errors.

Every failure the inventory reports derives from ``BookstoreError`` and
carries a short machine-readable ``code`` used by the console, the HTTP
router and the MCP tools.
"""

from typing import Any


class BookstoreError(ValueError):
    """Base class for all bookstore failures."""

    code = "bookstore_error"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "detail": self.message, **self.details}


class BookNotFoundError(BookstoreError):
    """No book is stored under the requested identifier."""

    code = "not_found"

    def __init__(self, book_id: str):
        super().__init__("Book not found.", book_id=book_id)
        self.book_id = book_id


class InsufficientStockError(BookstoreError):
    code = "insufficient_stock"

    def __init__(self, book_id: str, requested: int, available: int):
        super().__init__(
            f"Not enough stock: {available} available, {requested} requested.",
            book_id=book_id,
            requested=requested,
            available=available,
        )
        self.book_id = book_id
        self.requested = requested
        self.available = available


class InvalidQuantityError(BookstoreError):
    code = "invalid_quantity"

    def __init__(self, message: str, quantity: Any = None, book_id: str | None = None):
        super().__init__(message, book_id=book_id, quantity=quantity)
        self.book_id = book_id
        self.quantity = quantity


class NotForSaleError(BookstoreError):
    code = "not_for_sale"

    def __init__(self, book_id: str):
        super().__init__("Book is not for sale.", book_id=book_id)
        self.book_id = book_id


class StockNotTrackedError(BookstoreError):
    """Restock requested for a book kind that carries no stock."""

    code = "stock_not_tracked"

    def __init__(self, book_id: str, kind: str):
        super().__init__("Only paper books carry stock.", book_id=book_id, kind=kind)
        self.book_id = book_id
