"""
Unit tests for the fee ledger
"""

import unittest
from decimal import Decimal

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models import Fee, FeeStatus
from schooldesk.seed import seed_store
from schooldesk.services import fees
from schooldesk.store import Store


class TestFees(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = Store()
        await seed_store(self.store)

    def assertBalanced(self, fee):
        if fee.status != FeeStatus.NOT_PAID:
            self.assertEqual(fee.paid_amount + fee.pending_amount, fee.amount)

    async def test_create_fee(self):
        fee = await fees.create_fee(self.store, "student4", 600, "2025-06-01", "Lab Fee")
        self.assertEqual(fee.status, FeeStatus.NOT_PAID)
        self.assertEqual(fee.pending_amount, 600)
        self.assertIsNone(fee.paid_amount)
        self.assertIsNotNone(await self.store.get(Fee, fee.id))

    async def test_create_fee_requires_positive_amount(self):
        with self.assertRaises(ValidationError):
            await fees.create_fee(self.store, "student4", 0, "2025-06-01")

    async def test_partial_payment(self):
        fee = await fees.create_fee(self.store, "student4", 600, "2025-06-01")
        fee = await fees.record_payment(self.store, fee.id, 300)
        self.assertEqual(fee.status, FeeStatus.PARTIAL)
        self.assertEqual(fee.paid_amount, 300)
        self.assertEqual(fee.pending_amount, 300)
        self.assertIsNotNone(fee.paid_date)
        self.assertBalanced(fee)

    async def test_payment_boundaries(self):
        fee = await fees.create_fee(self.store, "student4", 600, "2025-06-01")
        paid = await fees.record_payment(self.store, fee.id, 600)
        self.assertEqual(paid.status, FeeStatus.PAID)
        self.assertEqual(paid.pending_amount, 0)
        partial = await fees.record_payment(self.store, fee.id, 599)
        self.assertEqual(partial.status, FeeStatus.PARTIAL)
        self.assertEqual(partial.pending_amount, 1)
        self.assertBalanced(partial)

    async def test_invalid_payments(self):
        fee = await fees.create_fee(self.store, "student4", 600, "2025-06-01")
        for amount in (0, -5, 600.01):
            with self.assertRaises(ValidationError):
                await fees.record_payment(self.store, fee.id, amount)
        stored = await self.store.get(Fee, fee.id)
        self.assertEqual(stored.status, FeeStatus.NOT_PAID)
        with self.assertRaises(NotFound):
            await fees.record_payment(self.store, "fee-404", 100)

    async def test_mark_paid_and_unpaid(self):
        fee = await fees.mark_paid(self.store, "fee-2")
        self.assertEqual(fee.status, FeeStatus.PAID)
        self.assertEqual(fee.paid_amount, 5000)
        self.assertEqual(fee.pending_amount, 0)
        self.assertBalanced(fee)

        fee = await fees.mark_unpaid(self.store, "fee-2")
        self.assertEqual(fee.status, FeeStatus.NOT_PAID)
        self.assertIsNone(fee.paid_amount)
        self.assertIsNone(fee.paid_date)
        self.assertEqual(fee.pending_amount, 5000)

    async def test_ledger_stays_balanced(self):
        await fees.record_payment(self.store, "fee-2", 1000)
        await fees.mark_paid(self.store, "fee-3")
        await fees.mark_unpaid(self.store, "fee-1")
        await fees.record_payment(self.store, "fee-1", 4999)
        for fee in await fees.list_fees(self.store):
            self.assertBalanced(fee)

    async def test_fractional_amounts_balance_exactly(self):
        fee = await fees.create_fee(self.store, "student4", 1682.28, "2025-06-01", "Transport Fee")
        self.assertEqual(fee.amount, Decimal("1682.28"))
        fee = await fees.record_payment(self.store, fee.id, 459.13)
        self.assertEqual(fee.paid_amount, Decimal("459.13"))
        self.assertEqual(fee.pending_amount, Decimal("1223.15"))
        self.assertBalanced(fee)

        for paid in ("0.10", "0.20", "1000.07", "1682.27"):
            fee = await fees.record_payment(self.store, fee.id, paid)
            self.assertEqual(fee.status, FeeStatus.PARTIAL)
            self.assertBalanced(fee)
        fee = await fees.record_payment(self.store, fee.id, "1682.28")
        self.assertEqual(fee.status, FeeStatus.PAID)
        self.assertEqual(fee.pending_amount, 0)

    async def test_amounts_rounded_to_cents(self):
        fee = await fees.create_fee(self.store, "student4", "99.999", "2025-06-01")
        self.assertEqual(fee.amount, Decimal("100.00"))
        fee = await fees.record_payment(self.store, fee.id, 33.333)
        self.assertEqual(fee.paid_amount, Decimal("33.33"))
        self.assertEqual(fee.pending_amount, Decimal("66.67"))
        self.assertBalanced(fee)

    async def test_fractional_totals(self):
        fee = await fees.create_fee(self.store, "student4", 0.1, "2025-06-01")
        await fees.record_payment(self.store, fee.id, 0.1)
        fee = await fees.create_fee(self.store, "student5", 0.2, "2025-06-01")
        await fees.record_payment(self.store, fee.id, 0.05)
        totals = await fees.fee_totals(self.store)
        self.assertEqual(totals.total_amount, Decimal("15000.30"))
        self.assertEqual(totals.collected, Decimal("7500.15"))
        self.assertEqual(totals.pending, Decimal("7500.15"))

    async def test_non_finite_amounts_rejected(self):
        for amount in (float("nan"), float("inf"), float("-inf"), "NaN", "abc"):
            with self.assertRaises(ValidationError):
                await fees.create_fee(self.store, "student4", amount, "2025-06-01")
        self.assertEqual(len(await fees.list_fees(self.store, student_id="student4")), 0)

        fee = await fees.create_fee(self.store, "student4", 600, "2025-06-01")
        for amount in (float("nan"), float("inf"), float("-inf")):
            with self.assertRaises(ValidationError):
                await fees.record_payment(self.store, fee.id, amount)
        stored = await self.store.get(Fee, fee.id)
        self.assertEqual(stored.status, FeeStatus.NOT_PAID)
        self.assertIsNone(stored.paid_amount)
        self.assertEqual(stored.pending_amount, 600)

    async def test_list_fees_filters(self):
        partial = await fees.list_fees(self.store, status="partial")
        self.assertEqual([f.id for f in partial], ["fee-3"])
        by_student = await fees.list_fees(self.store, student_id="student1")
        self.assertEqual([f.id for f in by_student], ["fee-1"])
        by_name = await fees.list_fees(self.store, q="sophia")
        self.assertEqual([f.id for f in by_name], ["fee-2"])
        by_description = await fees.list_fees(self.store, q="tuition")
        self.assertEqual(len(by_description), 3)

    async def test_fee_totals(self):
        totals = await fees.fee_totals(self.store)
        self.assertEqual(totals.total_amount, 15000)
        self.assertEqual(totals.collected, 7500)
        self.assertEqual(totals.pending, 7500)
        self.assertEqual((totals.paid_count, totals.partial_count, totals.not_paid_count), (1, 1, 1))


if __name__ == '__main__':
    unittest.main()
