"""Pure-function rules engine pattern.

Rules are stateless functions that return a RuleResult. They do no I/O and
mutate nothing, so purchase handlers can evaluate every check before
touching stock or triggering fulfillment.
"""

from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0

    @property
    def first_failure(self) -> RuleResult | None:
        return self.failed[0] if self.failed else None


# ---------------------------------------------------------------------------
# Purchase rules
# ---------------------------------------------------------------------------

def _is_whole_number(quantity: Any) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool)


def check_positive_quantity(quantity: int) -> RuleResult:
    """Quantity must be a whole number of at least one copy."""
    if not _is_whole_number(quantity):
        passed = False
        message = f"Quantity must be a whole number, got {quantity!r}."
    else:
        passed = quantity >= 1
        message = "Quantity accepted" if passed else f"Quantity must be at least 1, got {quantity}."
    return RuleResult(
        passed=passed,
        rule_name="positive_quantity",
        message=message,
        details={"quantity": quantity},
    )


def check_stock_availability(stock: int, quantity: int) -> RuleResult:
    """Check that the remaining stock covers the requested quantity."""
    passed = stock >= quantity

    return RuleResult(
        passed=passed,
        rule_name="stock_availability",
        message=(
            f"In stock: {stock} available"
            if passed
            else f"Not enough stock: {stock} available, {quantity} requested."
        ),
        details={"available": stock, "requested": quantity},
    )


def check_single_copy(quantity: int) -> RuleResult:
    """Digital copies are sold one at a time."""
    passed = _is_whole_number(quantity) and quantity == 1
    return RuleResult(
        passed=passed,
        rule_name="single_copy",
        message=(
            "Single copy requested"
            if passed
            else "Only one copy of ebook can be bought at a time."
        ),
        details={"quantity": quantity},
    )


def check_sellable(book: Any) -> RuleResult:
    """A book is sellable unless it is a demo copy."""
    kind = getattr(book, "kind", None)
    passed = kind is not None and kind != "demo"
    return RuleResult(
        passed=passed,
        rule_name="sellable",
        message="Available for sale" if passed else "Book is not for sale.",
        details={"kind": kind},
    )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate.

    Example::

        result = evaluate_rules(
            check_positive_quantity(quantity),
            check_stock_availability(book.stock, quantity),
        )
        if not result.all_passed:
            reject(result.first_failure)
    """
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )
