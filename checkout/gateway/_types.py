"""
Gateway types — the order payload and what comes back.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from kungfu import Result

from checkout._types import Money, PaymentMethod
from checkout.cart import CartItem, ProductType
from checkout.session import CustomerId
from checkout.totals import OrderTotals


# ═══════════════════════════════════════════════════════════════════════════════
# Order Submission — Built Fresh per Attempt
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OrderLine:
    """One submitted line. price_reference is the catalogue-specific id."""

    price_reference: str | int | None
    quantity: int | None
    price: Money | None
    product_type: ProductType

    @classmethod
    def from_cart_item(cls, item: CartItem) -> OrderLine:
        return cls(
            price_reference=item.product_id,
            quantity=item.checked_quantity,
            price=item.checked_price,
            product_type=item.product_type,
        )


@dataclass(frozen=True, slots=True)
class OrderSubmission:
    """Immutable order payload; sent at most once per validation pass."""

    customer_id: CustomerId
    items: tuple[OrderLine, ...]
    total_amount: Money
    payment_method: PaymentMethod
    delivery_address: str
    delivery_fee: Money

    @classmethod
    def build(
        cls,
        *,
        customer_id: CustomerId,
        items: Sequence[CartItem],
        totals: OrderTotals,
        payment_method: PaymentMethod,
        delivery_address: str,
    ) -> OrderSubmission:
        return cls(
            customer_id=customer_id,
            items=tuple(OrderLine.from_cart_item(item) for item in items),
            total_amount=totals.total,
            payment_method=payment_method,
            delivery_address=delivery_address,
            delivery_fee=totals.delivery_fee,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Result Types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OrderResult:
    """
    Persisted order as reported by the backend.

    One submission can produce several orders (one per catalogue), hence
    the list of ids.
    """

    order_ids: tuple[str, ...]
    tracking_number: str

    @property
    def joined_ids(self) -> str:
        return ",".join(self.order_ids)


@dataclass(frozen=True, slots=True)
class GatewayError:
    """
    Submission rejected or never completed.

    server_message is the backend's human-readable explanation, when it
    sent one; callers prefer it over any generic text.
    """

    message: str
    status_code: int | None = None
    server_message: str | None = None
    cause: Exception | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Gateway Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class OrderGateway(Protocol):
    """
    Persists a finalized order.

    Idempotency is not guaranteed: calling submit twice may create two orders.
    """

    async def submit(self, order: OrderSubmission) -> Result[OrderResult, GatewayError]:
        ...


__all__ = (
    "OrderLine",
    "OrderSubmission",
    "OrderResult",
    "GatewayError",
    "OrderGateway",
)
