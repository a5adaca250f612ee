"""Text renderer for the bookstore vertical.

Turns bookstore result dicts (listings, receipts, removals, inventory
reports, errors) into the lines the console prints and the MCP tools can
hand back verbatim.
"""

from typing import Any, Dict

from core.engine.template_engine import (
    fmt_int,
    fmt_money,
    register_renderer,
    render_generic,
)

KIND_LABELS = {
    "paper": "Paper",
    "ebook": "EBook",
    "demo": "Demo Book",
}


def book_line(book: Dict[str, Any]) -> str:
    label = KIND_LABELS.get(book.get("kind"), book.get("kind", "?"))
    return f"{book['book_id']} - {book['title']} ({label})"


def render_bookstore(result_name: str, result: Dict[str, Any]) -> str:
    """Render bookstore results into plain text."""
    if "error" in result:
        return f"Error - {result.get('detail', result['error'])}"

    # -- Listing --
    if "books" in result and "result_count" in result:
        books = result["books"]
        lines = ["Available Books:"]
        if not books:
            lines.append("No books in stock.")
        for b in books:
            line = book_line(b)
            if b.get("kind") == "paper":
                line += f" - {fmt_money(b['price'])}, {fmt_int(b['stock'])} in stock"
            elif b.get("kind") == "ebook":
                line += f" - {fmt_money(b['price'])}, {b.get('file_type', '')}"
            lines.append(line)
        return "\n".join(lines)

    # -- Receipt --
    if "receipt" in result:
        r = result["receipt"]
        verb = "Shipping to" if r["channel"] == "ship" else "Emailed to"
        return "\n".join([
            f"Receipt: {r['quantity']} x {r['title']} @ {fmt_money(r['unit_price'])}",
            f"Total: {fmt_money(r['amount_paid'])} - {verb} {r['destination']}",
        ])

    # -- Outdated removal --
    if "removed" in result:
        removed = result["removed"]
        if not removed:
            return f"No books older than {result['max_age_years']} years."
        titles = ", ".join(f"{b['title']} ({b['year']})" for b in removed)
        return f"Removed {len(removed)} outdated book(s): {titles}"

    # -- Inventory report --
    if "total_units" in result and "out_of_stock" in result:
        lines = ["Inventory Report"]
        lines.append(f"Total Titles: {fmt_int(result['total_titles'])}")
        lines.append(f"Total Units: {fmt_int(result['total_units'])}")
        lines.append(f"Inventory Value: {fmt_money(result['total_inventory_value'])}")
        by_kind = result.get("by_kind", {})
        if by_kind:
            lines.append(
                "By Kind: " + ", ".join(
                    f"{KIND_LABELS.get(k, k)} {v}" for k, v in by_kind.items()
                )
            )
        for b in result["out_of_stock"]:
            lines.append(f"Out of stock: {b['title']}")
        for b in result["low_stock"]:
            lines.append(f"Low stock: {b['title']} ({b['stock']} remaining)")
        return "\n".join(lines)

    return render_generic(result_name, result)


# Auto-register on import
register_renderer("bookstore", render_bookstore)
