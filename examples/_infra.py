"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine, Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from checkout.cart import CartItem, ProductType


# Menu
@dataclass(frozen=True, slots=True)
class MenuEntry:
    code: str
    name: str
    product_type: ProductType
    price_id: int
    price: Decimal

    def to_item(self, quantity: int) -> CartItem:
        return CartItem(self.product_type, self.price_id, quantity, self.price, self.name)


MENU: dict[str, MenuEntry] = {
    entry.code: entry
    for entry in (
        MenuEntry("BELLY", "Lechon Belly", ProductType.LECHON, 11, Decimal("1200")),
        MenuEntry("WHOLE", "Whole Lechon (small)", ProductType.LECHON, 12, Decimal("6500")),
        MenuEntry("ADOBO", "Pork Adobo", ProductType.VIANDS, 21, Decimal("180")),
        MenuEntry("SISIG", "Sisig", ProductType.VIANDS, 22, Decimal("220.50")),
    )
}


# Navigation
@dataclass(slots=True)
class ConsoleNavigator:
    """Prints where the page would go and remembers it."""

    visited: list[str] = field(default_factory=list)

    def push(self, path: str, query: Mapping[str, str]) -> None:
        self.visited.append(path)
        print(f"\n  → navigate {path}")
        for key, value in query.items():
            print(f"      {key:16} {value}")

    def redirect(self, location: str) -> None:
        self.visited.append(location)
        print(f"\n  → redirect {location}")


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
