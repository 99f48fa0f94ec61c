"""
Flow — the checkout state machine.

    from checkout import flow as F

    controller = F.CheckoutController(
        cart=cart, session=verifier, gateway=gateway, navigator=navigator,
    )
    await controller.mount()

    match await controller.confirm_payment():
        case Ok(F.AwaitingConfirmation()):
            await controller.confirm()       # Gcash modal
        case Ok(F.Completed(receipt)):
            ...                              # COD went straight through
        case Error(err):
            show(err.message)
"""

from checkout.flow._errors import (
    CheckoutErrorKind,
    CheckoutError,
    CheckoutErrors,
    GENERIC_FAILURE,
    MISSING_ADDRESS,
    EMPTY_CART,
    LOGIN_AGAIN,
)
from checkout.flow._state import (
    Authenticating,
    Idle,
    AwaitingConfirmation,
    Submitting,
    Failed,
    Completed,
    Redirected,
    CheckoutPhase,
    CheckoutState,
    phase_name,
)
from checkout.flow._receipt import (
    Receipt,
    Navigator,
)
from checkout.flow._validate import validate
from checkout.flow._controller import CheckoutController

__all__ = (
    # Errors
    "CheckoutErrorKind",
    "CheckoutError",
    "CheckoutErrors",
    "GENERIC_FAILURE",
    "MISSING_ADDRESS",
    "EMPTY_CART",
    "LOGIN_AGAIN",
    # Phases
    "Authenticating",
    "Idle",
    "AwaitingConfirmation",
    "Submitting",
    "Failed",
    "Completed",
    "Redirected",
    "CheckoutPhase",
    "CheckoutState",
    "phase_name",
    # Receipt
    "Receipt",
    "Navigator",
    # Controller
    "validate",
    "CheckoutController",
)
