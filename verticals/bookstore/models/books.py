"""Book variants.

Book kinds sharing identity and pricing fields. Each variant pins
``kind`` to a literal, which doubles as the discriminator when books
arrive as JSON. Only the kinds in ``BookKind`` have purchase handlers.
Only ``PaperBook.stock`` changes after creation; every other field is
frozen.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from verticals.bookstore.exceptions import InsufficientStockError


class BookKind(str, Enum):
    PAPER = "paper"
    EBOOK = "ebook"
    DEMO = "demo"


class Book(BaseModel):
    """Fields common to every book in the catalog."""

    model_config = ConfigDict(validate_assignment=True)

    kind: str = Field(..., min_length=1, frozen=True)
    book_id: str = Field(..., min_length=1, frozen=True)
    title: str = Field(..., min_length=1, frozen=True)
    author: str = Field(..., frozen=True)
    year: int = Field(..., frozen=True)
    price: float = Field(..., ge=0, frozen=True)

    def age(self, current_year: int) -> int:
        return current_year - self.year


class PaperBook(Book):
    """Physical copy with a stock count. Shipped on purchase."""

    kind: Literal["paper"] = "paper"
    stock: int = Field(0, ge=0)

    def reduce_stock(self, quantity: int) -> None:
        if quantity > self.stock:
            raise InsufficientStockError(self.book_id, quantity, self.stock)
        self.stock -= quantity

    def add_stock(self, quantity: int) -> None:
        self.stock += quantity


class EBook(Book):
    """Digital copy. Emailed on purchase, one copy at a time."""

    kind: Literal["ebook"] = "ebook"
    file_type: str = Field("PDF", min_length=1, frozen=True)


class DemoBook(Book):
    """Showcase copy. Always free, never sold."""

    kind: Literal["demo"] = "demo"
    price: float = Field(0.0, ge=0, le=0, frozen=True)


AnyBook = Annotated[Union[PaperBook, EBook, DemoBook], Field(discriminator="kind")]
