"""Fulfillment actions for completed purchases.

Paper books are shipped to the customer's address, ebooks are emailed.
Neither action leaves the process: each one is logged and recorded so
callers can see what would have been dispatched.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from verticals.bookstore.models.books import Book

logger = logging.getLogger(__name__)


@dataclass
class FulfillmentRecord:
    """One dispatched shipment or email."""

    channel: str  # "ship" | "email"
    book_id: str
    destination: str
    quantity: int = 1
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FulfillmentService:
    """Logs shipments and emails and keeps a record of each."""

    def __init__(self):
        self.records: list[FulfillmentRecord] = []

    def ship(self, book: Book, address: str, quantity: int = 1) -> FulfillmentRecord:
        logger.info("Shipping paper book to %s", address)
        return self._record("ship", book, address, quantity)

    def email(self, book: Book, email: str) -> FulfillmentRecord:
        logger.info("Sending ebook to %s", email)
        return self._record("email", book, email, 1)

    def _record(self, channel: str, book: Book, destination: str, quantity: int) -> FulfillmentRecord:
        record = FulfillmentRecord(
            channel=channel,
            book_id=book.book_id,
            destination=destination,
            quantity=quantity,
        )
        self.records.append(record)
        return record
