"""
Cart types — line items as the checkout sees them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from checkout._types import Money


# ═══════════════════════════════════════════════════════════════════════════════
# Product Type — Discriminates the Price Reference
# ═══════════════════════════════════════════════════════════════════════════════


class ProductType(Enum):
    """
    Catalogue a cart entry comes from.

    Each catalogue keys its prices differently, so the price reference sent
    with an order depends on it.
    """

    LECHON = "lechon"
    VIANDS = "viands"

    @property
    def id_field(self) -> str:
        """Key holding the price reference in a raw cart entry."""
        return f"product{self.value}_id"


# ═══════════════════════════════════════════════════════════════════════════════
# Cart Item
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartItem:
    """
    A single cart line. Read-only to the checkout.

    quantity and unit_price are None when the source entry was malformed;
    such a line contributes zero to the subtotal instead of failing checkout.
    """

    product_type: ProductType
    product_id: str | int | None
    quantity: int | None
    unit_price: Money | None
    name: str = ""

    @property
    def line_total(self) -> Money:
        """unit_price × quantity, or 0 when either is missing or invalid."""
        if not _valid_quantity(self.quantity) or not _valid_price(self.unit_price):
            return Decimal(0)
        return Decimal(self.unit_price) * self.quantity  # type: ignore[arg-type, operator]

    @property
    def checked_price(self) -> Money | None:
        """unit_price when it is a finite non-negative amount, else None."""
        return self.unit_price if _valid_price(self.unit_price) else None

    @property
    def checked_quantity(self) -> int | None:
        return self.quantity if _valid_quantity(self.quantity) else None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CartItem:
        """
        Parse a raw cart entry.

        Shape:
            {"productType": "lechon", "productlechon_id": 7,
             "price": 1200, "quantity": 1, "name": "Lechon Belly"}

        Unknown productType raises ValueError; bad numbers become None.
        """
        product_type = ProductType(data.get("productType"))
        return cls(
            product_type=product_type,
            product_id=data.get(product_type.id_field),
            quantity=_parse_quantity(data.get("quantity")),
            unit_price=_parse_price(data.get("price")),
            name=str(data.get("name") or ""),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Lenient Number Parsing
# ═══════════════════════════════════════════════════════════════════════════════


def _valid_quantity(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _valid_price(value: object) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        return value >= 0
    return isinstance(value, Decimal) and value.is_finite() and value >= 0


def _parse_price(raw: object) -> Money | None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str, Decimal)):
        return None
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    return value if _valid_price(value) else None


def _parse_quantity(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    elif isinstance(raw, str) and raw.strip().isdigit():
        raw = int(raw.strip())
    return raw if _valid_quantity(raw) else None  # type: ignore[return-value]


__all__ = (
    "ProductType",
    "CartItem",
)
