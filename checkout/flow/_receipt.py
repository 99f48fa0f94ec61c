"""
Receipt handoff — what the order-record view receives after success.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlencode

from checkout._types import PaymentMethod
from checkout.gateway import OrderResult
from checkout.totals import OrderTotals


@dataclass(frozen=True, slots=True)
class Receipt:
    order: OrderResult
    totals: OrderTotals
    delivery_address: str
    payment_method: PaymentMethod

    def to_query(self) -> dict[str, str]:
        """Navigation parameters, money formatted with two decimals."""
        money = self.totals.formatted()
        return {
            "orderids": self.order.joined_ids,
            "tracking_number": self.order.tracking_number,
            "customerAddress": self.delivery_address,
            "subtotal": money["subtotal"],
            "deliveryFee": money["deliveryFee"],
            "total": money["total"],
            "paymentMethod": self.payment_method.value,
        }

    def location(self, path: str) -> str:
        return f"{path}?{urlencode(self.to_query())}"


class Navigator(Protocol):
    """Routing glue. The controller only ever hands it a destination."""

    def push(self, path: str, query: Mapping[str, str]) -> None:
        ...

    def redirect(self, location: str) -> None:
        ...


__all__ = ("Receipt", "Navigator")
