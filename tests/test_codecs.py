"""Tests for wire payloads."""

from decimal import Decimal

import pytest
from kungfu import Ok, Error
from pydantic import ValidationError

from checkout import PaymentMethod
from checkout.cart import ProductType
from checkout.gateway import GatewayError, OrderSubmission
from checkout.session import SessionInfo
from checkout.totals import compute_totals
from checkout.wire import CheckAuthResponse, ErrorResponse, OrderRequest, OrderResponse
from tests._fakes import adobo, lechon_belly


class TestCheckAuthResponse:
    def test_authenticated(self):
        payload = {"isAuthenticated": True, "customerid": 7, "customerAddress": "12 Mabini St"}

        info = CheckAuthResponse.model_validate(payload).to_domain()

        assert info == SessionInfo(authenticated=True, customer_id=7, delivery_address="12 Mabini St")

    def test_unauthenticated_ignores_other_fields(self):
        payload = {"isAuthenticated": False, "customerid": 7}

        info = CheckAuthResponse.model_validate(payload).to_domain()

        assert info == SessionInfo(authenticated=False)

    def test_missing_address_is_empty(self):
        payload = {"isAuthenticated": True, "customerid": "c-7", "customerAddress": None}

        info = CheckAuthResponse.model_validate(payload).to_domain()

        assert info.customer_id == "c-7"
        assert info.delivery_address == ""

    def test_empty_body_is_unauthenticated(self):
        assert CheckAuthResponse.model_validate({}).to_domain().authenticated is False


class TestOrderRequest:
    def test_wire_shape(self):
        items = [lechon_belly(), adobo(2)]
        order = OrderSubmission.build(
            customer_id=7,
            items=items,
            totals=compute_totals(items),
            payment_method=PaymentMethod.GCASH,
            delivery_address="12 Mabini St",
        )

        body = OrderRequest.from_domain(order).to_wire()

        assert body == {
            "customerid": 7,
            "items": [
                {"priceid": 11, "quantity": 1, "price": 1200.0, "productType": "lechon"},
                {"priceid": 21, "quantity": 2, "price": 180.0, "productType": "viands"},
            ],
            "total_amount": 1610.0,
            "payment_method": "Gcash",
            "delivery_address": "12 Mabini St",
            "delivery_fee": 50.0,
        }

    def test_parses_wire_body(self):
        body = {
            "customerid": "7",
            "items": [{"priceid": 11, "quantity": 1, "price": 1200, "productType": "lechon"}],
            "total_amount": 1250,
            "payment_method": "COD",
            "delivery_address": "12 Mabini St",
            "delivery_fee": 50,
        }

        order = OrderRequest.model_validate(body).to_domain()

        assert order.customer_id == "7"
        assert order.payment_method is PaymentMethod.COD
        assert order.items[0].product_type is ProductType.LECHON
        assert order.total_amount == Decimal("1250")

    def test_rejects_unknown_payment_method(self):
        body = {
            "customerid": 7,
            "items": [],
            "total_amount": 50,
            "payment_method": "card",
            "delivery_address": "x",
            "delivery_fee": 50,
        }

        with pytest.raises(ValidationError):
            OrderRequest.model_validate(body)


class TestOrderResponse:
    def test_success(self):
        result = OrderResponse.model_validate(
            {"orderids": [1001, "1002"], "tracking_number": "TRK-1"}
        ).to_domain()

        match result:
            case Ok(order):
                assert order.order_ids == ("1001", "1002")
                assert order.joined_ids == "1001,1002"
                assert order.tracking_number == "TRK-1"
            case Error(e):
                pytest.fail(f"unexpected error: {e}")

    @pytest.mark.parametrize("body", [{}, {"orderids": []}, {"orderids": [], "tracking_number": "T"}])
    def test_missing_order_ids_is_an_error(self, body):
        result = OrderResponse.model_validate(body).to_domain()

        assert isinstance(result, Error)
        assert isinstance(result.error, GatewayError)


class TestErrorResponse:
    def test_message(self):
        assert ErrorResponse.model_validate({"error": "Out of stock"}).message == "Out of stock"

    @pytest.mark.parametrize("body", [{}, {"error": ""}, {"error": "   "}, {"error": None}])
    def test_blank_message_is_none(self, body):
        assert ErrorResponse.model_validate(body).message is None
