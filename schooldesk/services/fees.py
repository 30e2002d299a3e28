"""Fee ledger: amounts due, payments and derived status."""
import logging
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models.fee import Fee, FeeCreate, FeeStatus, FeeTotals
from schooldesk.models.student import Student
from schooldesk.store import Store

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def to_money(value: Decimal | float | int | str, label: str = "Amount") -> Decimal:
    """Convert ``value`` to a Decimal rounded to cents; NaN and infinity are rejected."""
    try:
        # str() first so 1682.28 becomes Decimal("1682.28"), not its binary expansion
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{label} must be a number, got {value!r}")
    if not amount.is_finite():
        raise ValidationError(f"{label} must be a finite number, got {value!r}")
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


async def get_fee(store: Store, fee_id: str) -> Fee:
    fee = await store.get(Fee, fee_id)
    if not fee:
        raise NotFound(f"Fee with id {fee_id} not found")
    return fee


async def create_fee(
    store: Store,
    student_id: str,
    amount: Decimal | float | str,
    due_date: date | str,
    description: Optional[str] = None,
) -> Fee:
    amount = to_money(amount, "Fee amount")
    if amount <= 0:
        raise ValidationError("Fee amount must be greater than zero")
    data = FeeCreate(student_id=student_id, amount=amount, due_date=due_date, description=description)
    fee = Fee(**data.model_dump(), pending_amount=data.amount)
    return await store.insert(fee)


async def record_payment(store: Store, fee_id: str, paid_amount: Decimal | float | str) -> Fee:
    """Set the amount paid so far; a payment of the full amount settles the fee."""
    fee = await get_fee(store, fee_id)
    paid_amount = to_money(paid_amount, "Paid amount")
    if paid_amount <= 0:
        raise ValidationError("Paid amount must be greater than zero")
    if paid_amount > fee.amount:
        raise ValidationError(f"Paid amount {paid_amount} exceeds the fee amount {fee.amount}")

    fee.status = FeeStatus.PAID if paid_amount == fee.amount else FeeStatus.PARTIAL
    fee.paid_amount = paid_amount
    fee.pending_amount = fee.amount - paid_amount
    fee.paid_date = datetime.utcnow()
    fee.updated_at = fee.paid_date
    await store.save(fee)
    logger.info("Fee %s: %s paid, %s pending (%s)", fee.id, paid_amount, fee.pending_amount, fee.status.value)
    return fee


async def mark_paid(store: Store, fee_id: str) -> Fee:
    fee = await get_fee(store, fee_id)
    fee.status = FeeStatus.PAID
    fee.paid_amount = fee.amount
    fee.pending_amount = Decimal("0.00")
    fee.paid_date = datetime.utcnow()
    fee.updated_at = fee.paid_date
    await store.save(fee)
    logger.info("Fee %s marked paid", fee.id)
    return fee


async def mark_unpaid(store: Store, fee_id: str) -> Fee:
    fee = await get_fee(store, fee_id)
    fee.status = FeeStatus.NOT_PAID
    fee.paid_amount = None
    fee.paid_date = None
    fee.pending_amount = fee.amount
    fee.updated_at = datetime.utcnow()
    await store.save(fee)
    logger.info("Fee %s marked not paid", fee.id)
    return fee


async def list_fees(
    store: Store,
    student_id: Optional[str] = None,
    status: Optional[FeeStatus | str] = None,
    q: Optional[str] = None,
) -> list[Fee]:
    """Fees filtered by student and status; ``q`` searches the description and the student's name or number."""
    filters = {}
    if student_id:
        filters["student_id"] = student_id
    if status:
        filters["status"] = FeeStatus(status)
    fees = await store.find(Fee, **filters)
    if not q or not q.strip():
        return fees

    search = q.strip().lower()
    students = {s.id: s for s in await store.find(Student)}
    matched = []
    for fee in fees:
        student = students.get(fee.student_id)
        haystack = [fee.description or ""]
        if student:
            haystack += [student.name, student.enrollment_no]
        if any(search in text.lower() for text in haystack):
            matched.append(fee)
    return matched


async def fee_totals(store: Store) -> FeeTotals:
    totals = FeeTotals()
    for fee in await store.find(Fee):
        totals.total_amount += fee.amount
        totals.collected += fee.paid_amount or Decimal("0.00")
        totals.pending += fee.pending_amount
        if fee.status == FeeStatus.PAID:
            totals.paid_count += 1
        elif fee.status == FeeStatus.PARTIAL:
            totals.partial_count += 1
        else:
            totals.not_paid_count += 1
    return totals
