"""
checkout — checkout state machine and order submission.

    from checkout import flow as F     # Controller and phases
    from checkout import cart as K     # Cart items and sources
    from checkout import client as H   # HTTP session verifier and gateway
"""

from checkout import lift
from checkout import cart
from checkout import session
from checkout import gateway
from checkout import wire
from checkout import client
from checkout import flow
from checkout._types import (
    Lazy,
    Money,
    PaymentMethod,
)
from checkout.config import CheckoutConfig
from checkout.totals import OrderTotals, compute_totals
from checkout.flow import CheckoutController, CheckoutState

__version__ = "0.1.0"

__all__ = (
    "lift",
    "cart",
    "session",
    "gateway",
    "wire",
    "client",
    "flow",
    "Lazy",
    "Money",
    "PaymentMethod",
    "CheckoutConfig",
    "OrderTotals",
    "compute_totals",
    "CheckoutController",
    "CheckoutState",
)
