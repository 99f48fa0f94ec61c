"""
Cart — line items and the source capability the checkout is given.

    from checkout import cart as K

    source = K.MemoryCart([
        K.CartItem(K.ProductType.LECHON, 7, 1, Decimal("1200"), "Lechon Belly"),
    ])
    items = await source.items()

    # Wrap an existing store
    source = K.cart_from(items=store.load_items, clear=store.reset)
"""

from checkout.cart._types import (
    ProductType,
    CartItem,
)
from checkout.cart._source import (
    CartSource,
    FunctionalCart,
    cart_from,
    MemoryCart,
)

__all__ = (
    # Types
    "ProductType",
    "CartItem",
    # Source
    "CartSource",
    "FunctionalCart",
    "cart_from",
    "MemoryCart",
)
