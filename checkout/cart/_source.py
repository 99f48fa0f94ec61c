"""
Cart source — the capability the checkout reads from and clears.

The checkout never owns cart storage; it receives a CartSource.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from checkout.cart._types import CartItem


# ═══════════════════════════════════════════════════════════════════════════════
# CartSource Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class CartSource(Protocol):
    """
    Read current items; clear on confirmed order success only.

    Example — adapting a session-backed cart:

        class SessionCart(CartSource):
            def __init__(self, session: Session):
                self.session = session

            async def items(self) -> Sequence[CartItem]:
                raw = self.session.get("cart", [])
                return [CartItem.from_mapping(entry) for entry in raw]

            async def clear(self) -> None:
                self.session["cart"] = []
    """

    async def items(self) -> Sequence[CartItem]:
        """Current line items, in display order."""
        ...

    async def clear(self) -> None:
        """Empty the cart."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Function-based Cart Builder
# ═══════════════════════════════════════════════════════════════════════════════

type ItemsFn = Callable[[], Awaitable[Sequence[CartItem]]]
type ClearFn = Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class FunctionalCart:
    """
    CartSource built from functions.

    Example:
        cart = cart_from(items=store.load_items, clear=store.reset)
    """

    _items: ItemsFn
    _clear: ClearFn

    async def items(self) -> Sequence[CartItem]:
        return await self._items()

    async def clear(self) -> None:
        await self._clear()


def cart_from(items: ItemsFn, clear: ClearFn) -> FunctionalCart:
    """Create a CartSource from two async callables."""
    return FunctionalCart(_items=items, _clear=clear)


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Cart — For Testing and Demos
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryCart:
    """
    In-memory cart.

    Note: single process only, nothing survives a restart.
    """

    def __init__(self, items: Iterable[CartItem] = ()) -> None:
        self._items: list[CartItem] = list(items)
        self._lock = asyncio.Lock()

    async def items(self) -> Sequence[CartItem]:
        async with self._lock:
            return tuple(self._items)

    async def add(self, item: CartItem) -> None:
        async with self._lock:
            self._items.append(item)

    async def clear(self) -> None:
        async with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


__all__ = (
    "CartSource",
    "FunctionalCart",
    "cart_from",
    "MemoryCart",
)
