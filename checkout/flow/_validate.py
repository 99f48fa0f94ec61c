"""
Pre-submission validation. Local only, never touches the network.
"""

from __future__ import annotations

from collections.abc import Sequence

from kungfu import Result, Ok, Error

from checkout.cart import CartItem
from checkout.flow._errors import CheckoutError, CheckoutErrors
from checkout.flow._state import CheckoutState


def validate(state: CheckoutState, items: Sequence[CartItem]) -> Result[str, CheckoutError]:
    """
    Check the form is ready to submit. Returns the resolved delivery address.

    Address is checked before the cart, so a blank address on an empty
    cart reports the address.
    """
    address = state.delivery_address
    if not address:
        return Error(CheckoutErrors.missing_address())
    if not items:
        return Error(CheckoutErrors.empty_cart())
    return Ok(address)


__all__ = ("validate",)
