"""Demo catalog used by the console, the API and the MCP server."""

from typing import Optional

from verticals.bookstore.fulfillment import FulfillmentService
from verticals.bookstore.inventory import Inventory
from verticals.bookstore.models.books import Book, DemoBook, EBook, PaperBook


def demo_books() -> list[Book]:
    return [
        PaperBook(book_id="P001", title="Java Basics", year=2018, price=45.0, author="John Smith", stock=10),
        EBook(book_id="E001", title="Python for All", year=2020, price=30.0, author="Alice Doe", file_type="PDF"),
        DemoBook(book_id="D001", title="Data Structures Demo", year=2010, author="James Bond"),
    ]


def seed_inventory(fulfillment: Optional[FulfillmentService] = None) -> Inventory:
    """Build a fresh inventory holding the demo books."""
    return Inventory(demo_books(), fulfillment=fulfillment)
