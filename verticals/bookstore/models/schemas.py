"""Pydantic schemas for customers, purchases and API request/response validation."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Domain values
# ---------------------------------------------------------------------------

class Customer(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)


class PurchaseReceipt(BaseModel):
    book_id: str
    title: str
    kind: str
    quantity: int
    unit_price: float
    amount_paid: float
    channel: str
    destination: str
    purchased_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class PurchaseRequest(BaseModel):
    customer: Customer
    quantity: int = 1


class RestockRequest(BaseModel):
    quantity: int


class RemoveOutdatedRequest(BaseModel):
    max_age_years: Optional[int] = Field(None, ge=0)
    current_year: Optional[int] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class RemovedBooksResponse(BaseModel):
    data: list
    count: int
    max_age_years: int
    current_year: int
