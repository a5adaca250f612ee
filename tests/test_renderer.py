"""Test the template engine and bookstore renderer."""
from core.engine.template_engine import TemplateEngine, fmt_int, fmt_money, render_generic
from verticals.bookstore import renderer  # noqa: F401
from verticals.bookstore.renderer import book_line, render_bookstore


def test_formatters():
    assert fmt_money(1234.5) == "$1,234.50"
    assert fmt_money(None) == "N/A"
    assert fmt_int(12000) == "12,000"


def test_bookstore_renderer_registered():
    assert "bookstore" in TemplateEngine.list_verticals()


def test_book_line():
    assert book_line({"book_id": "D001", "title": "Data Structures Demo", "kind": "demo"}) == (
        "D001 - Data Structures Demo (Demo Book)"
    )


def test_render_listing():
    text = render_bookstore("list_books", {
        "result_count": 2,
        "books": [
            {"book_id": "P001", "title": "Java Basics", "kind": "paper", "price": 45.0, "stock": 10},
            {"book_id": "E001", "title": "Python for All", "kind": "ebook", "price": 30.0, "file_type": "PDF"},
        ],
    })
    assert text.splitlines() == [
        "Available Books:",
        "P001 - Java Basics (Paper) - $45.00, 10 in stock",
        "E001 - Python for All (EBook) - $30.00, PDF",
    ]


def test_render_receipt():
    text = render_bookstore("purchase", {"receipt": {
        "book_id": "E001", "title": "Python for All", "kind": "ebook", "quantity": 1,
        "unit_price": 30.0, "amount_paid": 30.0, "channel": "email", "destination": "a@b.c",
    }})
    assert "Total: $30.00 - Emailed to a@b.c" in text


def test_render_error():
    assert render_bookstore("purchase", {"error": "not_for_sale", "detail": "Book is not for sale."}) == (
        "Error - Book is not for sale."
    )


def test_render_removed_none():
    text = render_bookstore("remove_outdated", {"removed": [], "max_age_years": 10, "current_year": 2025})
    assert text == "No books older than 10 years."


def test_render_summary():
    text = render_bookstore("summary", {
        "total_titles": 2, "total_units": 3, "total_inventory_value": 135.0,
        "by_kind": {"paper": 1, "ebook": 1, "demo": 0},
        "out_of_stock": [], "low_stock": [{"book_id": "P", "title": "Java Basics", "stock": 3}],
    })
    assert "Inventory Value: $135.00" in text
    assert "Low stock: Java Basics (3 remaining)" in text


def test_engine_prefix_and_fallback():
    text = TemplateEngine.render("other", {"count": 2, "status": "ok"}, vertical="unknown", prefix="Shop")
    assert text == "Shop: other: count=2, status=ok"
    assert render_generic("x", {"error": "boom"}) == "Error - boom"


def test_bookstore_falls_back_for_other_results():
    text = TemplateEngine.render("health_check", {"server": "bookstore", "status": "healthy"}, vertical="bookstore")
    assert text == "health_check: server=bookstore, status=healthy"
