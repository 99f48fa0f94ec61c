"""
Totals — subtotal, delivery fee, grand total.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from checkout._types import Money, format_money
from checkout.cart import CartItem
from checkout.config import DEFAULT_DELIVERY_FEE


@dataclass(frozen=True, slots=True)
class OrderTotals:
    """Derived from cart contents on demand; total is never stored separately."""

    subtotal: Money
    delivery_fee: Money

    @property
    def total(self) -> Money:
        return self.subtotal + self.delivery_fee

    def formatted(self) -> dict[str, str]:
        """Two-decimal strings, keyed as the receipt view expects."""
        return {
            "subtotal": format_money(self.subtotal),
            "deliveryFee": format_money(self.delivery_fee),
            "total": format_money(self.total),
        }


def compute_totals(
    items: Iterable[CartItem],
    delivery_fee: Money = DEFAULT_DELIVERY_FEE,
) -> OrderTotals:
    """
    Sum line totals and add the flat delivery fee.

    Never fails: a line with a missing or invalid price or quantity adds 0.

    Example:
        compute_totals([CartItem(LECHON, 7, 1, Decimal("1200"), "Lechon Belly")])
        # subtotal=1200, delivery_fee=50, total=1250
    """
    subtotal = sum((item.line_total for item in items), Decimal(0))
    return OrderTotals(subtotal=subtotal, delivery_fee=delivery_fee)


__all__ = ("OrderTotals", "compute_totals")
