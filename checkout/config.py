"""
Checkout configuration — behavior and endpoint settings.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import timedelta
from decimal import Decimal, InvalidOperation

from checkout._types import Money, PaymentMethod


# ═══════════════════════════════════════════════════════════════════════════════
# Defaults
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_DELIVERY_FEE: Money = Decimal("50")
DEFAULT_SUBMIT_TIMEOUT = timedelta(seconds=30)

ENV_PREFIX = "CHECKOUT_"


# ═══════════════════════════════════════════════════════════════════════════════
# CheckoutConfig — Full Configuration
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CheckoutConfig:
    """
    Checkout configuration.

    Fluent builder pattern — chain methods to configure.

    Example:
        config = (
            CheckoutConfig()
            .with_base_url("https://shop.example")
            .with_delivery_fee(Decimal("75"))
            .with_submit_timeout(seconds=10)
        )

    Note: Immutable — each method returns new CheckoutConfig.
    """

    delivery_fee: Money = DEFAULT_DELIVERY_FEE
    default_payment_method: PaymentMethod = PaymentMethod.GCASH
    submit_timeout: timedelta = DEFAULT_SUBMIT_TIMEOUT
    base_url: str = "http://localhost:3000"
    check_auth_path: str = "/api/check-auth"
    orders_path: str = "/api/orders"
    login_location: str = "/login?redirect=/payment"
    receipt_path: str = "/order-record"

    def with_delivery_fee(self, fee: Money) -> CheckoutConfig:
        """
        Set the flat delivery fee added to every order.

        Example:
            .with_delivery_fee(Decimal("50"))
        """
        if not fee.is_finite() or fee < 0:
            raise ValueError(f"delivery fee must be a non-negative amount, got {fee}")
        return replace(self, delivery_fee=fee)

    def with_default_payment_method(self, method: PaymentMethod) -> CheckoutConfig:
        """Payment method preselected when the checkout mounts."""
        return replace(self, default_payment_method=method)

    def with_submit_timeout(
        self,
        *,
        seconds: float | None = None,
        delta: timedelta | None = None,
    ) -> CheckoutConfig:
        """
        Bound the whole submission (session re-check + order call).

        Example:
            .with_submit_timeout(seconds=30)
        """
        if delta is not None:
            timeout = delta
        else:
            timeout = timedelta(seconds=30 if seconds is None else seconds)
        if timeout.total_seconds() <= 0:
            raise ValueError("submit timeout must be positive")
        return replace(self, submit_timeout=timeout)

    def with_base_url(self, base_url: str) -> CheckoutConfig:
        """Backend origin the HTTP clients talk to."""
        return replace(self, base_url=base_url.rstrip("/"))

    def with_endpoints(
        self,
        *,
        check_auth: str | None = None,
        orders: str | None = None,
    ) -> CheckoutConfig:
        """Override backend paths."""
        return replace(
            self,
            check_auth_path=check_auth or self.check_auth_path,
            orders_path=orders or self.orders_path,
        )

    def with_navigation(
        self,
        *,
        login: str | None = None,
        receipt: str | None = None,
    ) -> CheckoutConfig:
        """Override where the flow sends the customer."""
        return replace(
            self,
            login_location=login or self.login_location,
            receipt_path=receipt or self.receipt_path,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CheckoutConfig:
        """
        Build config from CHECKOUT_* variables over the defaults.

        Recognized: CHECKOUT_BASE_URL, CHECKOUT_DELIVERY_FEE,
        CHECKOUT_SUBMIT_TIMEOUT (seconds), CHECKOUT_DEFAULT_PAYMENT_METHOD.
        Malformed values raise ValueError.
        """
        env = os.environ if environ is None else environ
        config = cls()

        if base_url := env.get(f"{ENV_PREFIX}BASE_URL"):
            config = config.with_base_url(base_url)

        if fee := env.get(f"{ENV_PREFIX}DELIVERY_FEE"):
            try:
                config = config.with_delivery_fee(Decimal(fee))
            except InvalidOperation as exc:
                raise ValueError(f"{ENV_PREFIX}DELIVERY_FEE is not a number: {fee!r}") from exc

        if timeout := env.get(f"{ENV_PREFIX}SUBMIT_TIMEOUT"):
            try:
                seconds = float(timeout)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}SUBMIT_TIMEOUT is not a number: {timeout!r}") from exc
            config = config.with_submit_timeout(delta=timedelta(seconds=seconds))

        if method := env.get(f"{ENV_PREFIX}DEFAULT_PAYMENT_METHOD"):
            config = config.with_default_payment_method(PaymentMethod(method))

        return config


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "DEFAULT_DELIVERY_FEE",
    "DEFAULT_SUBMIT_TIMEOUT",
    "CheckoutConfig",
)
