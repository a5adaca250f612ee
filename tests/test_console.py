"""Test the console demo session."""
from patterns.domain_config import BookstoreConfig, InventoryConfig
from verticals.bookstore.catalog import seed_inventory
from verticals.bookstore.console import run_console


def session(answers, max_age=10):
    config = BookstoreConfig(inventory=InventoryConfig(max_book_age_years=max_age, current_year=2025))
    inputs = iter(answers)
    printed = []
    inventory = run_console(
        seed_inventory(),
        config,
        input_fn=lambda prompt: next(inputs),
        output=printed.append,
    )
    return inventory, "\n".join(printed)


def test_paper_purchase_session():
    inventory, out = session(["Ada", "ada@example.com", "1 Main St", "paper", "P001", "3"])
    assert inventory.get("P001").stock == 7
    assert "Quantum book store: Total: $135.00 - Shipping to 1 Main St" in out
    assert out.endswith("Quantum book store: All test operations completed.")


def test_outdated_demo_book_is_removed_first():
    inventory, out = session(["Ada", "ada@example.com", "1 Main St", "ebook", "E001"])
    assert "D001" not in inventory
    assert "Removed 1 outdated book(s): Data Structures Demo (2010)" in out
    assert "Quantum book store: Error - Book not found." in out


def test_demo_book_not_for_sale():
    _, out = session(["Ada", "ada@example.com", "1 Main St", "ebook", "E001"], max_age=20)
    assert "Quantum book store: Total: $30.00 - Emailed to ada@example.com" in out
    assert "Quantum book store: Error - Book is not for sale." in out


def test_errors_do_not_abort():
    inventory, out = session(["Ada", "ada@example.com", "1 Main St", "paper", "P001", "50"])
    assert inventory.get("P001").stock == 10
    assert "Error - Not enough stock: 10 available, 50 requested." in out
    assert "All test operations completed." in out


def test_non_numeric_quantity():
    inventory, out = session(["Ada", "ada@example.com", "1 Main St", "paper", "P001", "lots"])
    assert inventory.get("P001").stock == 10
    assert "Error - Quantity must be a whole number, got 'lots'." in out


def test_blank_answer_is_asked_again():
    _, out = session(["", "Ada", "ada@example.com", "1 Main St", "ebook", "E001"])
    assert "Quantum book store: This field is required." in out
