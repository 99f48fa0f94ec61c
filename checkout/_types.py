"""
Core types for checkout.

Re-exports from kungfu + money and payment types.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Lazy[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail. Nothing runs until awaited."""

# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════

type Money = Decimal
"""Single-currency amount. Formatting to two places happens at the edges."""

CENTS = Decimal("0.01")


def format_money(amount: Money) -> str:
    """Render an amount with exactly two decimal places: 1250 → '1250.00'."""
    return str(amount.quantize(CENTS))


# ═══════════════════════════════════════════════════════════════════════════════
# Payment Method
# ═══════════════════════════════════════════════════════════════════════════════


class PaymentMethod(Enum):
    """
    How the customer pays. Values are the wire spelling.

    GCASH needs an out-of-band confirmation (the modal) before submission.
    """

    COD = "COD"
    GCASH = "Gcash"

    @property
    def requires_confirmation(self) -> bool:
        return self is PaymentMethod.GCASH


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Lazy",
    # Money
    "Money",
    "CENTS",
    "format_money",
    # Payment
    "PaymentMethod",
)
