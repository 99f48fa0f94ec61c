"""
Checkout state — one tagged phase plus the editable form fields.

The phase replaces separate processing/error/modal flags; those are
derived views so they can never contradict each other.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from checkout._types import PaymentMethod
from checkout.flow._receipt import Receipt


# ═══════════════════════════════════════════════════════════════════════════════
# Phases
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Authenticating:
    """Mount-time session check in flight."""


@dataclass(frozen=True, slots=True)
class Idle:
    """Form is editable; nothing pending."""


@dataclass(frozen=True, slots=True)
class AwaitingConfirmation:
    """Validated Gcash order waiting on the confirmation modal."""


@dataclass(frozen=True, slots=True)
class Submitting:
    """One submission in flight. Holds the re-entrancy lock."""

    from_modal: bool = False


@dataclass(frozen=True, slots=True)
class Failed:
    """Last attempt failed; editable again, retry allowed."""

    message: str


@dataclass(frozen=True, slots=True)
class Completed:
    """Order persisted, cart cleared, receipt handed off. Terminal."""

    receipt: Receipt


@dataclass(frozen=True, slots=True)
class Redirected:
    """Session check failed at mount; sent elsewhere. Terminal."""

    location: str


type CheckoutPhase = (
    Authenticating
    | Idle
    | AwaitingConfirmation
    | Submitting
    | Failed
    | Completed
    | Redirected
)


def phase_name(phase: CheckoutPhase) -> str:
    return type(phase).__name__


# ═══════════════════════════════════════════════════════════════════════════════
# State
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CheckoutState:
    phase: CheckoutPhase
    payment_method: PaymentMethod
    address: str = ""
    session_address: str = ""

    @classmethod
    def initial(cls, payment_method: PaymentMethod) -> CheckoutState:
        return cls(phase=Authenticating(), payment_method=payment_method)

    # Derived views

    @property
    def is_processing(self) -> bool:
        return isinstance(self.phase, Submitting)

    @property
    def is_gcash_modal_open(self) -> bool:
        # The modal stays up while its confirm is being processed.
        match self.phase:
            case AwaitingConfirmation() | Submitting(from_modal=True):
                return True
            case _:
                return False

    @property
    def error_message(self) -> str:
        match self.phase:
            case Failed(message):
                return message
            case _:
                return ""

    @property
    def can_edit(self) -> bool:
        return isinstance(self.phase, (Idle, Failed))

    @property
    def can_select_payment(self) -> bool:
        return isinstance(self.phase, (Idle, Failed))

    @property
    def is_terminal(self) -> bool:
        return isinstance(self.phase, (Completed, Redirected))

    @property
    def delivery_address(self) -> str:
        """Typed address if non-blank, otherwise the one on file."""
        typed = self.address.strip()
        return typed if typed else self.session_address.strip()

    # Transitions

    def to(self, phase: CheckoutPhase) -> CheckoutState:
        return replace(self, phase=phase)

    def with_address(self, address: str) -> CheckoutState:
        return replace(self, address=address)

    def with_payment_method(self, method: PaymentMethod) -> CheckoutState:
        return replace(self, payment_method=method)


__all__ = (
    "Authenticating",
    "Idle",
    "AwaitingConfirmation",
    "Submitting",
    "Failed",
    "Completed",
    "Redirected",
    "CheckoutPhase",
    "phase_name",
    "CheckoutState",
)
