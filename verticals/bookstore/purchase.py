"""Purchase dispatch by book kind.

Each sellable kind registers a handler that validates the request, updates
the book and triggers fulfillment. A kind without a handler is not for
sale. Handlers evaluate every rule before mutating stock or dispatching,
so a rejected purchase leaves no trace.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from patterns.rules_engine import (
    check_positive_quantity,
    check_single_copy,
    check_stock_availability,
    evaluate_rules,
)
from verticals.bookstore.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    NotForSaleError,
)
from verticals.bookstore.fulfillment import FulfillmentRecord, FulfillmentService
from verticals.bookstore.models.books import Book, BookKind, EBook, PaperBook
from verticals.bookstore.models.schemas import Customer


@dataclass
class PurchaseOutcome:
    amount_paid: float
    fulfillment: FulfillmentRecord


# ---------------------------------------------------------------------------
# Handler type and registry
# ---------------------------------------------------------------------------

PurchaseHandler = Callable[[Book, int, Customer, FulfillmentService], PurchaseOutcome]

_PURCHASE_HANDLERS: Dict[str, PurchaseHandler] = {}


def register_purchase_handler(kind: BookKind | str, handler: PurchaseHandler) -> None:
    """Register the purchase handler for a book kind."""
    _PURCHASE_HANDLERS[BookKind(kind).value] = handler


def get_purchase_handler(kind: BookKind | str) -> Optional[PurchaseHandler]:
    return _PURCHASE_HANDLERS.get(BookKind(kind).value)


def sellable_kinds() -> list[str]:
    return list(_PURCHASE_HANDLERS.keys())


def dispatch_purchase(
    book: Book,
    quantity: int,
    customer: Customer,
    fulfillment: FulfillmentService,
) -> PurchaseOutcome:
    """Run the handler registered for ``book.kind``.

    Raises NotForSaleError when the kind has no handler.
    """
    handler = _PURCHASE_HANDLERS.get(getattr(book, "kind", None))
    if handler is None:
        raise NotForSaleError(book.book_id)
    return handler(book, quantity, customer, fulfillment)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def purchase_paper_book(
    book: PaperBook,
    quantity: int,
    customer: Customer,
    fulfillment: FulfillmentService,
) -> PurchaseOutcome:
    """Take ``quantity`` copies off the shelf and ship them."""
    checks = evaluate_rules(
        check_positive_quantity(quantity),
        check_stock_availability(book.stock, quantity),
    )
    failure = checks.first_failure
    if failure is not None:
        if failure.rule_name == "stock_availability":
            raise InsufficientStockError(book.book_id, quantity, book.stock)
        raise InvalidQuantityError(failure.message, quantity=quantity, book_id=book.book_id)

    book.reduce_stock(quantity)
    record = fulfillment.ship(book, customer.address, quantity)
    return PurchaseOutcome(amount_paid=book.price * quantity, fulfillment=record)


def purchase_ebook(
    book: EBook,
    quantity: int,
    customer: Customer,
    fulfillment: FulfillmentService,
) -> PurchaseOutcome:
    """Email a single digital copy."""
    check = check_single_copy(quantity)
    if not check.passed:
        raise InvalidQuantityError(check.message, quantity=quantity, book_id=book.book_id)

    record = fulfillment.email(book, customer.email)
    return PurchaseOutcome(amount_paid=book.price, fulfillment=record)


register_purchase_handler(BookKind.PAPER, purchase_paper_book)
register_purchase_handler(BookKind.EBOOK, purchase_ebook)
