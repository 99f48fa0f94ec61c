"""
Checkout controller — drives the phase machine against its collaborators.

Every public action returns a Result. Actions that are not allowed in the
current phase come back as INVALID_TRANSITION (or BUSY while a submission
is in flight) and leave the state untouched.
"""

from __future__ import annotations

import asyncio

from kungfu import LazyCoroResult, Result, Ok, Error

from checkout import lift as L
from checkout._types import Lazy, PaymentMethod
from checkout.cart import CartItem, CartSource
from checkout.config import CheckoutConfig
from checkout.gateway import OrderGateway, OrderSubmission
from checkout.logging import get_logger
from checkout.session import CustomerId, SessionInfo, SessionVerifier
from checkout.totals import OrderTotals, compute_totals
from checkout.flow._errors import GENERIC_FAILURE, CheckoutError, CheckoutErrors
from checkout.flow._receipt import Navigator, Receipt
from checkout.flow._state import (
    Authenticating,
    AwaitingConfirmation,
    CheckoutPhase,
    CheckoutState,
    Completed,
    Failed,
    Idle,
    Redirected,
    Submitting,
    phase_name,
)
from checkout.flow._validate import validate

logger = get_logger(__name__)


type Prepared = tuple[OrderSubmission, OrderTotals]


class CheckoutController:
    """
    Owns CheckoutState for one checkout page.

    Collaborators are injected; the controller holds no global state.

    Example:
        controller = CheckoutController(
            cart=MemoryCart(items),
            session=HTTPSessionVerifier(http, config),
            gateway=HTTPOrderGateway(http, config),
            navigator=navigator,
            config=config,
        )
        await controller.mount()
        controller.set_address("12 Mabini St")
        controller.select_payment(PaymentMethod.COD)
        match await controller.confirm_payment():
            case Ok(Completed(receipt)):
                ...
            case Error(err):
                print(err.message)
    """

    def __init__(
        self,
        *,
        cart: CartSource,
        session: SessionVerifier,
        gateway: OrderGateway,
        navigator: Navigator,
        config: CheckoutConfig | None = None,
    ) -> None:
        self._cart = cart
        self._session = session
        self._gateway = gateway
        self._navigator = navigator
        self._config = config or CheckoutConfig()
        self._state = CheckoutState.initial(self._config.default_payment_method)

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def config(self) -> CheckoutConfig:
        return self._config

    def _set(self, state: CheckoutState) -> CheckoutState:
        if type(state.phase) is not type(self._state.phase):
            logger.debug(
                "checkout_transition",
                source=phase_name(self._state.phase),
                target=phase_name(state.phase),
            )
        self._state = state
        return state

    def _reject(self, action: str) -> Error[CheckoutError]:
        if self._state.is_processing:
            logger.debug("checkout_busy", action=action)
            return Error(CheckoutErrors.busy())
        return Error(CheckoutErrors.invalid_transition(action, phase_name(self._state.phase)))

    # ═══════════════════════════════════════════════════════════════════════════
    # Mount
    # ═══════════════════════════════════════════════════════════════════════════

    async def mount(self) -> Result[SessionInfo, CheckoutError]:
        """
        Check the session once on page entry.

        Authenticated: prefill the address and go Idle. Anything else
        redirects to the login page and ends in Redirected.
        """
        if not isinstance(self._state.phase, Authenticating):
            return self._reject("mount")

        cause: object | None = None
        match await self._session.verify():
            case Ok(SessionInfo(authenticated=True) as info):
                self._set(CheckoutState(
                    phase=Idle(),
                    payment_method=self._state.payment_method,
                    address=info.delivery_address,
                    session_address=info.delivery_address,
                ))
                return Ok(info)
            case Ok(_):
                logger.warning("checkout_mount_unauthenticated")
            case Error(err):
                cause = err
                logger.warning("checkout_mount_session_error", error=err.message)

        location = self._config.login_location
        self._navigator.redirect(location)
        self._set(self._state.to(Redirected(location)))
        return Error(CheckoutErrors.not_authenticated(location, cause))

    # ═══════════════════════════════════════════════════════════════════════════
    # Form
    # ═══════════════════════════════════════════════════════════════════════════

    def set_address(self, address: str) -> Result[CheckoutState, CheckoutError]:
        if not self._state.can_edit:
            return self._reject("edit address")
        return Ok(self._set(self._state.with_address(address)))

    def select_payment(self, method: PaymentMethod) -> Result[CheckoutState, CheckoutError]:
        if not self._state.can_select_payment:
            return self._reject("select payment")
        return Ok(self._set(self._state.with_payment_method(method)))

    async def confirm_payment(self) -> Result[CheckoutPhase, CheckoutError]:
        """
        Validate the form, then branch on payment method.

        Gcash stops at AwaitingConfirmation. COD submits immediately and
        returns the phase the submission ended in.
        """
        if not self._state.can_edit:
            return self._reject("confirm payment")

        items = await self._cart.items()
        if not self._state.can_edit:
            return self._reject("confirm payment")

        match validate(self._state, items):
            case Error(err):
                self._set(self._state.to(Failed(err.message)))
                return Error(err)
            case Ok(_):
                pass

        if self._state.payment_method.requires_confirmation:
            return Ok(self._set(self._state.to(AwaitingConfirmation())).phase)

        return (await self._submit(from_modal=False)).map(Completed)

    # ═══════════════════════════════════════════════════════════════════════════
    # Confirmation modal
    # ═══════════════════════════════════════════════════════════════════════════

    async def confirm(self) -> Result[Receipt, CheckoutError]:
        """Modal confirm button."""
        if not isinstance(self._state.phase, AwaitingConfirmation):
            return self._reject("confirm")
        return await self._submit(from_modal=True)

    def cancel_confirmation(self) -> Result[CheckoutState, CheckoutError]:
        """Modal cancel button. Ignored while the submission is running."""
        if not isinstance(self._state.phase, AwaitingConfirmation):
            return self._reject("cancel")
        return Ok(self._set(self._state.to(Idle())))

    # ═══════════════════════════════════════════════════════════════════════════
    # Submission
    # ═══════════════════════════════════════════════════════════════════════════

    async def submit(self) -> Result[Receipt, CheckoutError]:
        """
        Send the order. At most one submission runs at a time.

        A call while another is in flight returns BUSY without touching the
        network or the state. A payment method that needs confirmation is
        only sent from the open modal.
        """
        if isinstance(self._state.phase, AwaitingConfirmation):
            return await self._submit(from_modal=True)
        if self._state.payment_method.requires_confirmation:
            return self._reject("submit before confirming payment")
        return await self._submit(from_modal=False)

    async def _submit(self, *, from_modal: bool) -> Result[Receipt, CheckoutError]:
        if not isinstance(self._state.phase, (Idle, Failed, AwaitingConfirmation)):
            return self._reject("submit")

        # Entered before the first await: this is the re-entrancy lock.
        self._set(self._state.to(Submitting(from_modal=from_modal)))
        payment_method = self._state.payment_method
        logger.info("order_submit_started", payment_method=payment_method.value)

        pipeline = L.bounded(
            self._reverify()
            .then(self._prepare)
            .then(self._send),
            seconds=self._config.submit_timeout.total_seconds(),
            on_timeout=CheckoutErrors.timed_out,
        )

        try:
            outcome = await pipeline
        except asyncio.CancelledError:
            self._set(self._state.to(Failed(GENERIC_FAILURE)))
            raise
        except Exception as exc:
            # A collaborator raised instead of returning an Error.
            logger.exception("order_submit_crashed")
            outcome = Error(CheckoutErrors.gateway(cause=exc))

        match outcome:
            case Ok(receipt):
                await self._clear_cart()
                logger.info(
                    "order_submit_succeeded",
                    order_ids=receipt.order.joined_ids,
                    tracking_number=receipt.order.tracking_number,
                )
                self._set(self._state.to(Completed(receipt)))
                self._navigator.push(self._config.receipt_path, receipt.to_query())
                return Ok(receipt)
            case Error(err):
                logger.warning("order_submit_failed", kind=err.kind.value, message=err.message)
                self._set(self._state.to(Failed(err.message)))
                return Error(err)

    def _reverify(self) -> Lazy[CustomerId, CheckoutError]:
        async def run() -> Result[CustomerId, CheckoutError]:
            match await self._session.verify():
                case Ok(SessionInfo(authenticated=True, customer_id=customer_id)) if customer_id is not None:
                    return Ok(customer_id)
                case Ok(_):
                    return Error(CheckoutErrors.login_again())
                case Error(err):
                    return Error(CheckoutErrors.session_unavailable(err))

        return LazyCoroResult(run)

    async def _prepare(self, customer_id: CustomerId) -> Result[Prepared, CheckoutError]:
        items: tuple[CartItem, ...] = tuple(await self._cart.items())
        match validate(self._state, items):
            case Error(err):
                return Error(err)
            case Ok(address):
                totals = compute_totals(items, self._config.delivery_fee)
                order = OrderSubmission.build(
                    customer_id=customer_id,
                    items=items,
                    totals=totals,
                    payment_method=self._state.payment_method,
                    delivery_address=address,
                )
                return Ok((order, totals))

    async def _send(self, prepared: Prepared) -> Result[Receipt, CheckoutError]:
        order, totals = prepared
        match await self._gateway.submit(order):
            case Ok(result):
                return Ok(Receipt(
                    order=result,
                    totals=totals,
                    delivery_address=order.delivery_address,
                    payment_method=order.payment_method,
                ))
            case Error(err):
                return Error(CheckoutErrors.gateway(err.server_message, cause=err))

    async def _clear_cart(self) -> None:
        cleared = await L.catching_async(self._cart.clear, on_error=lambda e: e)
        match cleared:
            case Error(exc):
                # Order is already persisted; a stale cart must not turn it into a failure.
                logger.error("cart_clear_failed", error=str(exc))
            case Ok(_):
                pass


__all__ = ("CheckoutController",)
