"""Bookstore inventory.

Owns every book keyed by ``book_id`` and is the single writer for them.
Purchases are routed through the kind-specific handlers in
``verticals.bookstore.purchase``.
"""

import logging
from typing import Any, Optional

from patterns.repository import InMemoryRepository
from patterns.rules_engine import check_positive_quantity, check_sellable
from verticals.bookstore.exceptions import (
    BookNotFoundError,
    BookstoreError,
    InvalidQuantityError,
    StockNotTrackedError,
)
from verticals.bookstore.fulfillment import FulfillmentService
from verticals.bookstore.models.books import Book, BookKind, PaperBook
from verticals.bookstore.models.schemas import Customer, PurchaseReceipt
from verticals.bookstore.purchase import dispatch_purchase

logger = logging.getLogger(__name__)


class Inventory(InMemoryRepository[Book]):
    """In-memory book store with add, remove and purchase operations."""

    key_attr = "book_id"

    def __init__(
        self,
        books: Optional[list[Book]] = None,
        fulfillment: Optional[FulfillmentService] = None,
    ):
        self.fulfillment = fulfillment or FulfillmentService()
        super().__init__(books)

    # -- Catalog maintenance --

    def add(self, book: Book) -> Book:
        """Insert a book, overwriting any record with the same id."""
        super().add(book)
        logger.info("Book added - %s", book.title)
        return book

    def get(self, book_id: str) -> Book:
        book = self.find(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def remove(self, book_id: str) -> Book:
        book = self.get(book_id)
        self.delete(book_id)
        logger.info("Book removed - %s", book.title)
        return book

    def remove_older_than(self, max_age_years: int, current_year: int) -> list[Book]:
        """Remove and return every book more than ``max_age_years`` old.

        Age is ``current_year - year``; a book exactly at the threshold stays.
        """
        removed = self.remove_where(lambda book: book.age(current_year) > max_age_years)
        for book in removed:
            logger.info("Removed outdated book - %s", book.title)
        return removed

    def restock(self, book_id: str, quantity: int) -> PaperBook:
        book = self.get(book_id)
        if not isinstance(book, PaperBook):
            raise StockNotTrackedError(book_id, book.kind)
        check = check_positive_quantity(quantity)
        if not check.passed:
            raise InvalidQuantityError(check.message, quantity=quantity, book_id=book_id)
        book.add_stock(quantity)
        logger.info("Restocked %s - %d now in stock", book.title, book.stock)
        return book

    # -- Purchasing --

    def purchase(self, book_id: str, quantity: int, customer: Customer) -> float:
        """Buy ``quantity`` copies of a book and return the amount paid."""
        return self.checkout(book_id, quantity, customer).amount_paid

    def checkout(self, book_id: str, quantity: int, customer: Customer) -> PurchaseReceipt:
        """Buy a book and return the full receipt.

        Raises BookNotFoundError, InsufficientStockError, InvalidQuantityError
        or NotForSaleError. Stock and fulfillment are untouched on failure.
        """
        try:
            book = self.get(book_id)
            outcome = dispatch_purchase(book, quantity, customer, self.fulfillment)
        except BookstoreError as exc:
            logger.warning("Purchase of %s rejected: %s", book_id, exc.message)
            raise

        logger.info("Purchase successful. Paid: %s", outcome.amount_paid)
        return PurchaseReceipt(
            book_id=book.book_id,
            title=book.title,
            kind=book.kind,
            quantity=quantity,
            unit_price=book.price,
            amount_paid=outcome.amount_paid,
            channel=outcome.fulfillment.channel,
            destination=outcome.fulfillment.destination,
        )

    # -- Queries --

    def list_books(
        self,
        kind: Optional[BookKind | str] = None,
        sellable_only: bool = False,
    ) -> list[Book]:
        books = list(self)
        if kind is not None:
            books = [book for book in books if book.kind == kind]
        if sellable_only:
            books = [book for book in books if check_sellable(book).passed]
        return books

    def low_stock(self, threshold: int = 5) -> list[PaperBook]:
        """Paper books at or below ``threshold`` copies, fewest first."""
        books = [b for b in self if isinstance(b, PaperBook) and b.stock <= threshold]
        return sorted(books, key=lambda b: b.stock)

    def summary(self, low_stock_threshold: int = 5) -> dict[str, Any]:
        """Inventory report: title/unit counts, stock value, kind breakdown."""
        paper = [b for b in self if isinstance(b, PaperBook)]
        by_kind = {kind.value: 0 for kind in BookKind}
        for book in self:
            by_kind[book.kind] = by_kind.get(book.kind, 0) + 1

        return {
            "total_titles": len(self),
            "total_units": sum(b.stock for b in paper),
            "total_inventory_value": round(sum(b.stock * b.price for b in paper), 2),
            "by_kind": by_kind,
            "out_of_stock": [
                {"book_id": b.book_id, "title": b.title} for b in paper if b.stock == 0
            ],
            "low_stock": [
                {"book_id": b.book_id, "title": b.title, "stock": b.stock}
                for b in self.low_stock(low_stock_threshold)
                if b.stock > 0
            ],
            "threshold": low_stock_threshold,
        }
