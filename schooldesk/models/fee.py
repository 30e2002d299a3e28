"""Fee records: amount due, amount paid, payment status."""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schooldesk.models.base import Document


class FeeStatus(str, Enum):
    PAID = "paid"
    PARTIAL = "partial"
    NOT_PAID = "not_paid"


class Fee(Document):
    """Invariant: paid_amount + pending_amount == amount unless status is not_paid.

    Money is kept as ``Decimal`` with two places so the balance holds exactly.
    """

    student_id: str
    amount: Decimal = Field(decimal_places=2)
    due_date: date
    status: FeeStatus = FeeStatus.NOT_PAID
    paid_amount: Optional[Decimal] = Field(default=None, decimal_places=2)
    pending_amount: Decimal = Field(default=Decimal("0.00"), decimal_places=2)
    paid_date: Optional[datetime] = None
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "fees"
        prefix = "fee"


class FeeCreate(BaseModel):
    student_id: str
    amount: Decimal = Field(decimal_places=2)
    due_date: date
    description: Optional[str] = None


class FeeTotals(BaseModel):
    total_amount: Decimal = Decimal("0.00")
    collected: Decimal = Decimal("0.00")
    pending: Decimal = Decimal("0.00")
    paid_count: int = 0
    partial_count: int = 0
    not_paid_count: int = 0
