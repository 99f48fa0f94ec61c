"""
Wire payloads — JSON shapes of the backend endpoints.

Field names and spellings follow the backend exactly; domain types never
leak these spellings.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from kungfu import Result, Ok, Error
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from checkout._types import PaymentMethod
from checkout.cart import ProductType
from checkout.gateway import GatewayError, OrderLine, OrderResult, OrderSubmission
from checkout.session import SessionInfo

# Decimal inside, JSON number on the wire
WireMoney = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# ═══════════════════════════════════════════════════════════════════════════════
# GET /api/check-auth
# ═══════════════════════════════════════════════════════════════════════════════


class CheckAuthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_authenticated: bool = Field(default=False, alias="isAuthenticated")
    customer_id: str | int | None = Field(default=None, alias="customerid")
    customer_address: str | None = Field(default=None, alias="customerAddress")

    def to_domain(self) -> SessionInfo:
        if not self.is_authenticated:
            return SessionInfo(authenticated=False)
        return SessionInfo(
            authenticated=True,
            customer_id=self.customer_id,
            delivery_address=self.customer_address or "",
        )

    @classmethod
    def from_domain(cls, dom: SessionInfo) -> CheckAuthResponse:
        return cls(
            is_authenticated=dom.authenticated,
            customer_id=dom.customer_id if dom.authenticated else None,
            customer_address=dom.delivery_address,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# PUT /api/orders
# ═══════════════════════════════════════════════════════════════════════════════


class OrderLineRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    priceid: str | int | None
    quantity: int | None
    price: WireMoney | None
    product_type: ProductType = Field(alias="productType")

    def to_domain(self) -> OrderLine:
        return OrderLine(
            price_reference=self.priceid,
            quantity=self.quantity,
            price=self.price,
            product_type=self.product_type,
        )

    @classmethod
    def from_domain(cls, dom: OrderLine) -> OrderLineRequest:
        return cls(
            priceid=dom.price_reference,
            quantity=dom.quantity,
            price=dom.price,
            product_type=dom.product_type,
        )


class OrderRequest(BaseModel):
    customerid: str | int
    items: list[OrderLineRequest]
    total_amount: WireMoney
    payment_method: PaymentMethod
    delivery_address: str
    delivery_fee: WireMoney

    def to_domain(self) -> OrderSubmission:
        return OrderSubmission(
            customer_id=self.customerid,
            items=tuple(line.to_domain() for line in self.items),
            total_amount=self.total_amount,
            payment_method=self.payment_method,
            delivery_address=self.delivery_address,
            delivery_fee=self.delivery_fee,
        )

    @classmethod
    def from_domain(cls, dom: OrderSubmission) -> OrderRequest:
        return cls(
            customerid=dom.customer_id,
            items=[OrderLineRequest.from_domain(line) for line in dom.items],
            total_amount=dom.total_amount,
            payment_method=dom.payment_method,
            delivery_address=dom.delivery_address,
            delivery_fee=dom.delivery_fee,
        )

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


class OrderResponse(BaseModel):
    orderids: list[str | int] = Field(default_factory=list)
    tracking_number: str | None = None

    def to_domain(self) -> Result[OrderResult, GatewayError]:
        """A 2xx without order ids is not a success."""
        if not self.orderids:
            return Error(GatewayError("Order response carried no order ids"))
        return Ok(OrderResult(
            order_ids=tuple(str(oid) for oid in self.orderids),
            tracking_number=self.tracking_number or "",
        ))

    @classmethod
    def from_domain(cls, dom: OrderResult) -> OrderResponse:
        return cls(orderids=list(dom.order_ids), tracking_number=dom.tracking_number)


# ═══════════════════════════════════════════════════════════════════════════════
# Error body (any endpoint)
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    error: str | None = None

    @property
    def message(self) -> str | None:
        """Server message if it is usable text."""
        if self.error and self.error.strip():
            return self.error
        return None


__all__ = (
    "CheckAuthResponse",
    "OrderLineRequest",
    "OrderRequest",
    "OrderResponse",
    "ErrorResponse",
)
