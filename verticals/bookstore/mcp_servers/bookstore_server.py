"""Bookstore MCP Server: 4 tools.

Exposes the in-memory inventory to MCP clients: listing, purchasing,
outdated-stock removal and an inventory report. Bookstore errors come back
as ``{"error": code, "detail": message}`` instead of being raised.
"""

from typing import Any

from pydantic import ValidationError

from core.mcp.server_template import create_mcp_server
from verticals.bookstore.catalog import seed_inventory
from verticals.bookstore.config import config
from verticals.bookstore.exceptions import BookstoreError
from verticals.bookstore.inventory import Inventory
from verticals.bookstore.models.schemas import Customer

# ---------------------------------------------------------------------------
# In-memory inventory shared by every tool call
# ---------------------------------------------------------------------------

_inventory: Inventory = seed_inventory()


def get_inventory() -> Inventory:
    return _inventory


def reset_inventory(inventory: Inventory | None = None) -> Inventory:
    """Replace the served inventory (the demo catalog by default)."""
    global _inventory
    _inventory = inventory if inventory is not None else seed_inventory()
    return _inventory


# ---------------------------------------------------------------------------
# Tool 1: list_books
# ---------------------------------------------------------------------------

async def list_books(kind: str | None = None) -> dict[str, Any]:
    """List the books in the store, optionally only one kind (paper, ebook, demo)."""
    books = get_inventory().list_books(kind)
    return {
        "kind": kind,
        "result_count": len(books),
        "books": [b.model_dump() for b in books],
    }


# ---------------------------------------------------------------------------
# Tool 2: purchase_book
# ---------------------------------------------------------------------------

async def purchase_book(
    book_id: str,
    name: str,
    email: str,
    address: str,
    quantity: int = 1,
) -> dict[str, Any]:
    """Buy a book. Paper books ship to the address, ebooks go to the email."""
    try:
        customer = Customer(name=name, email=email, address=address)
    except ValidationError as exc:
        return {"error": "validation_error", "detail": str(exc)}
    try:
        receipt = get_inventory().checkout(book_id, quantity, customer)
    except BookstoreError as exc:
        return exc.to_dict()
    return {"receipt": receipt.model_dump(mode="json")}


# ---------------------------------------------------------------------------
# Tool 3: remove_outdated_books
# ---------------------------------------------------------------------------

async def remove_outdated_books(
    max_age_years: int | None = None,
    current_year: int | None = None,
) -> dict[str, Any]:
    """Remove books older than max_age_years, measured against current_year."""
    if max_age_years is None:
        max_age_years = config.inventory.max_book_age_years
    if current_year is None:
        current_year = config.resolve_current_year()

    removed = get_inventory().remove_older_than(max_age_years, current_year)
    return {
        "max_age_years": max_age_years,
        "current_year": current_year,
        "removed": [b.model_dump() for b in removed],
    }


# ---------------------------------------------------------------------------
# Tool 4: inventory_summary
# ---------------------------------------------------------------------------

async def inventory_summary() -> dict[str, Any]:
    """Inventory report: titles, units, stock value, low and out-of-stock books."""
    return get_inventory().summary(config.inventory.low_stock_threshold)


# ---------------------------------------------------------------------------
# Server instance
# ---------------------------------------------------------------------------

bookstore_server = create_mcp_server(
    name="bookstore",
    instructions="Bookstore inventory, purchase and stock maintenance tools.",
)

for _tool in (list_books, purchase_book, remove_outdated_books, inventory_summary):
    bookstore_server.tool(_tool)
