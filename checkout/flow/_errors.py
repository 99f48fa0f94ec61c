"""
Checkout errors — one value type, classified by kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CheckoutErrorKind(Enum):
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHENTICATION_LAPSE = "authentication_lapse"
    GATEWAY = "gateway"
    BUSY = "busy"
    INVALID_TRANSITION = "invalid_transition"


@dataclass(frozen=True, slots=True)
class CheckoutError:
    kind: CheckoutErrorKind
    message: str
    cause: object | None = None


GENERIC_FAILURE = "Error processing your order. Please try again."
MISSING_ADDRESS = "Please provide a delivery address"
EMPTY_CART = "Your cart is empty"
LOGIN_AGAIN = "Please log in again"


class CheckoutErrors:
    @staticmethod
    def missing_address() -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.VALIDATION, MISSING_ADDRESS)

    @staticmethod
    def empty_cart() -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.VALIDATION, EMPTY_CART)

    @staticmethod
    def not_authenticated(location: str, cause: object | None = None) -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.AUTHENTICATION, f"Redirecting to {location}", cause)

    @staticmethod
    def login_again(cause: object | None = None) -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.AUTHENTICATION_LAPSE, LOGIN_AGAIN, cause)

    @staticmethod
    def session_unavailable(cause: object | None = None) -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.AUTHENTICATION_LAPSE, GENERIC_FAILURE, cause)

    @staticmethod
    def gateway(server_message: str | None = None, cause: object | None = None) -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.GATEWAY, server_message or GENERIC_FAILURE, cause)

    @staticmethod
    def timed_out(seconds: float) -> CheckoutError:
        return CheckoutError(
            CheckoutErrorKind.GATEWAY,
            GENERIC_FAILURE,
            TimeoutError(f"submission exceeded {seconds}s"),
        )

    @staticmethod
    def busy() -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.BUSY, "A submission is already in progress")

    @staticmethod
    def invalid_transition(action: str, phase: str) -> CheckoutError:
        return CheckoutError(
            CheckoutErrorKind.INVALID_TRANSITION,
            f"Cannot {action} while {phase}",
        )


__all__ = (
    "CheckoutErrorKind",
    "CheckoutError",
    "CheckoutErrors",
    "GENERIC_FAILURE",
    "MISSING_ADDRESS",
    "EMPTY_CART",
    "LOGIN_AGAIN",
)
