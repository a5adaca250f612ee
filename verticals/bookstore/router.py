"""Bookstore API router.

CRUD over the in-memory inventory plus the purchase, restock and
outdated-removal operations. The inventory lives on ``app.state`` and is
injected with ``Depends(get_inventory)``; bookstore errors are turned into
HTTP responses by the handler registered in ``api.main``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from patterns.domain_config import BookstoreConfig
from verticals.bookstore.inventory import Inventory
from verticals.bookstore.models.books import AnyBook, BookKind
from verticals.bookstore.models.schemas import (
    PurchaseReceipt,
    PurchaseRequest,
    RemovedBooksResponse,
    RemoveOutdatedRequest,
    RestockRequest,
)

router = APIRouter()


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def get_inventory(request: Request) -> Inventory:
    """FastAPI dependency for the application's Inventory."""
    return request.app.state.inventory


def get_config(request: Request) -> BookstoreConfig:
    return request.app.state.config


# ============================================================================
# Book Endpoints
# ============================================================================

@router.get("/books")
async def list_books(
    kind: Optional[BookKind] = None,
    sellable: bool = False,
    inventory: Inventory = Depends(get_inventory),
):
    """List books, optionally restricted to one kind or to sellable books."""
    books = inventory.list_books(kind, sellable_only=sellable)
    return {"data": [b.model_dump() for b in books], "count": len(books)}


@router.get("/books/{book_id}")
async def get_book(book_id: str, inventory: Inventory = Depends(get_inventory)):
    return inventory.get(book_id).model_dump()


@router.post("/books", status_code=201)
async def add_book(
    book: AnyBook,
    inventory: Inventory = Depends(get_inventory),
):
    """Add a book, replacing any book with the same id.

    The body's ``kind`` field (paper, ebook, demo) selects the variant.
    """
    return inventory.add(book).model_dump()


@router.delete("/books/{book_id}", status_code=204)
async def delete_book(book_id: str, inventory: Inventory = Depends(get_inventory)):
    inventory.remove(book_id)


# ============================================================================
# Purchase / stock Endpoints
# ============================================================================

@router.post("/books/{book_id}/purchase", response_model=PurchaseReceipt)
async def purchase_book(
    book_id: str,
    request: PurchaseRequest,
    inventory: Inventory = Depends(get_inventory),
):
    """Buy a book: ships paper copies, emails ebooks, refuses demo copies."""
    return inventory.checkout(book_id, request.quantity, request.customer)


@router.post("/books/{book_id}/restock")
async def restock_book(
    book_id: str,
    request: RestockRequest,
    inventory: Inventory = Depends(get_inventory),
):
    return inventory.restock(book_id, request.quantity).model_dump()


# ============================================================================
# Inventory Endpoints
# ============================================================================

@router.post("/inventory/remove-outdated", response_model=RemovedBooksResponse)
async def remove_outdated(
    request: Optional[RemoveOutdatedRequest] = None,
    inventory: Inventory = Depends(get_inventory),
    config: BookstoreConfig = Depends(get_config),
):
    """Remove books older than ``max_age_years`` (defaults from config)."""
    request = request or RemoveOutdatedRequest()
    max_age = (
        request.max_age_years
        if request.max_age_years is not None
        else config.inventory.max_book_age_years
    )
    current_year = (
        request.current_year
        if request.current_year is not None
        else config.resolve_current_year()
    )
    removed = inventory.remove_older_than(max_age, current_year)
    return RemovedBooksResponse(
        data=[b.model_dump() for b in removed],
        count=len(removed),
        max_age_years=max_age,
        current_year=current_year,
    )


@router.get("/inventory/summary")
async def inventory_summary(
    inventory: Inventory = Depends(get_inventory),
    config: BookstoreConfig = Depends(get_config),
):
    return inventory.summary(config.inventory.low_stock_threshold)
