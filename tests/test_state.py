"""Tests for checkout state views, receipts and the bounded helper."""

import asyncio
from decimal import Decimal
from urllib.parse import parse_qs, urlsplit

from kungfu import Ok, Error, LazyCoroResult

from checkout import PaymentMethod, lift as L
from checkout.flow import (
    AwaitingConfirmation,
    CheckoutState,
    Completed,
    Failed,
    Idle,
    Receipt,
    Redirected,
    Submitting,
)
from checkout.gateway import OrderResult
from checkout.totals import OrderTotals


def receipt() -> Receipt:
    return Receipt(
        order=OrderResult(("1001", "1002"), "TRK-1"),
        totals=OrderTotals(Decimal("1200"), Decimal("50")),
        delivery_address="12 Mabini St",
        payment_method=PaymentMethod.GCASH,
    )


class TestDerivedViews:
    def test_idle(self):
        state = CheckoutState(Idle(), PaymentMethod.GCASH)

        assert not state.is_processing
        assert not state.is_gcash_modal_open
        assert state.error_message == ""
        assert state.can_select_payment

    def test_awaiting_confirmation_opens_modal(self):
        state = CheckoutState(AwaitingConfirmation(), PaymentMethod.GCASH)

        assert state.is_gcash_modal_open
        assert not state.is_processing

    def test_modal_stays_open_while_its_submission_runs(self):
        from_modal = CheckoutState(Submitting(from_modal=True), PaymentMethod.GCASH)
        direct = CheckoutState(Submitting(), PaymentMethod.COD)

        assert from_modal.is_gcash_modal_open
        assert not direct.is_gcash_modal_open
        assert from_modal.is_processing and direct.is_processing
        assert not from_modal.can_select_payment

    def test_failed_carries_message(self):
        state = CheckoutState(Failed("Your cart is empty"), PaymentMethod.COD)

        assert state.error_message == "Your cart is empty"
        assert state.can_edit

    def test_terminal_phases(self):
        assert CheckoutState(Completed(receipt()), PaymentMethod.COD).is_terminal
        assert CheckoutState(Redirected("/login"), PaymentMethod.COD).is_terminal
        assert not CheckoutState(Idle(), PaymentMethod.COD).is_terminal

    def test_delivery_address_prefers_typed(self):
        state = CheckoutState(Idle(), PaymentMethod.COD, address=" 45 Rizal ", session_address="12 Mabini")

        assert state.delivery_address == "45 Rizal"
        assert state.with_address("").delivery_address == "12 Mabini"


class TestReceipt:
    def test_query_keys(self):
        assert receipt().to_query() == {
            "orderids": "1001,1002",
            "tracking_number": "TRK-1",
            "customerAddress": "12 Mabini St",
            "subtotal": "1200.00",
            "deliveryFee": "50.00",
            "total": "1250.00",
            "paymentMethod": "Gcash",
        }

    def test_location_encodes_query(self):
        location = receipt().location("/order-record")

        parts = urlsplit(location)
        assert parts.path == "/order-record"
        assert parse_qs(parts.query)["customerAddress"] == ["12 Mabini St"]
        assert parse_qs(parts.query)["orderids"] == ["1001,1002"]


class TestBounded:
    async def test_passes_result_through(self):
        result = await L.bounded(L.pure(3), seconds=1, on_timeout=lambda s: f"late {s}")

        assert result == Ok(3)

    async def test_passes_error_through(self):
        result = await L.bounded(L.fail("nope"), seconds=1, on_timeout=lambda s: f"late {s}")

        assert result == Error("nope")

    async def test_maps_timeout(self):
        async def slow():
            await asyncio.sleep(1)
            return Ok("done")

        result = await L.bounded(LazyCoroResult(slow), seconds=0.01, on_timeout=lambda s: f"late {s}")

        assert result == Error("late 0.01")
