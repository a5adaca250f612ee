"""Console demo for the bookstore.

Seeds the demo catalog, drops outdated books, collects the customer's
details and one purchase request, then shows that demo copies cannot be
bought. Every failure is printed and the run carries on.
"""

import logging
from typing import Callable, Optional

from core.engine.template_engine import TemplateEngine
from core.observability.logging_setup import setup_logging
from patterns.domain_config import BookstoreConfig
from verticals.bookstore import renderer  # noqa: F401  registers the bookstore renderer
from verticals.bookstore.catalog import seed_inventory
from verticals.bookstore.exceptions import BookstoreError, InvalidQuantityError
from verticals.bookstore.inventory import Inventory
from verticals.bookstore.models.schemas import Customer

logger = logging.getLogger(__name__)

DEMO_BOOK_ID = "D001"


class Console:
    """Prompt/print boundary around an Inventory."""

    def __init__(
        self,
        inventory: Inventory,
        config: BookstoreConfig,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.inventory = inventory
        self.config = config
        self.input_fn = input_fn
        self.output = output
        self.engine = TemplateEngine()

    def say(self, message: str) -> None:
        self.output(f"{self.config.store_name}: {message}")

    def show(self, result_name: str, result: dict) -> None:
        self.output(
            self.engine.render(result_name, result, "bookstore", prefix=self.config.store_name)
        )

    def prompt(self, label: str) -> str:
        """Ask until a non-blank answer is given."""
        while True:
            answer = self.input_fn(label).strip()
            if answer:
                return answer
            self.say("This field is required.")

    def ask_customer(self) -> Customer:
        return Customer(
            name=self.prompt("Enter your name: "),
            email=self.prompt("Enter your email: "),
            address=self.prompt("Enter your address: "),
        )

    def remove_outdated(self) -> None:
        max_age = self.config.inventory.max_book_age_years
        current_year = self.config.resolve_current_year()
        removed = self.inventory.remove_older_than(max_age, current_year)
        self.show("remove_outdated", {
            "removed": [b.model_dump() for b in removed],
            "max_age_years": max_age,
            "current_year": current_year,
        })

    def list_books(self) -> None:
        books = self.inventory.list_books()
        self.output("")
        self.show("list_books", {
            "books": [b.model_dump() for b in books],
            "result_count": len(books),
        })

    def buy(self, book_id: str, quantity: int, customer: Customer) -> None:
        try:
            receipt = self.inventory.checkout(book_id, quantity, customer)
        except BookstoreError as exc:
            self.show("purchase", exc.to_dict())
        else:
            self.show("purchase", {"receipt": receipt.model_dump(mode="json")})

    def ask_purchase(self, customer: Customer) -> None:
        book_type = self.input_fn(
            "Do you want to buy a PaperBook or EBook? (Enter 'paper' or 'ebook'): "
        ).strip().lower()
        book_id = self.prompt("Enter the book ID you want to buy: ")

        quantity = 1
        if book_type == "paper":
            raw = self.input_fn("Enter the quantity: ").strip()
            try:
                quantity = int(raw)
            except ValueError:
                exc = InvalidQuantityError(f"Quantity must be a whole number, got {raw!r}.", quantity=raw)
                self.show("purchase", exc.to_dict())
                return

        self.buy(book_id, quantity, customer)

    def run(self) -> None:
        self.say("Please make sure to enter your name, email, and address to proceed with your order.")
        self.remove_outdated()

        customer = self.ask_customer()
        self.list_books()
        self.ask_purchase(customer)

        self.output("")
        self.say("Trying to buy Demo Book (should fail):")
        self.buy(DEMO_BOOK_ID, 1, customer)

        self.say("All test operations completed.")


def run_console(
    inventory: Optional[Inventory] = None,
    config: Optional[BookstoreConfig] = None,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> Inventory:
    """Run the demo session. Returns the inventory it operated on."""
    config = config or BookstoreConfig.default()
    if inventory is None:
        inventory = seed_inventory()
    Console(inventory, config, input_fn=input_fn, output=output).run()
    return inventory


def main() -> int:
    config = BookstoreConfig.from_env()
    setup_logging(config)
    try:
        run_console(config=config)
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input closed, session aborted")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
