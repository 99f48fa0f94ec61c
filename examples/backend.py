"""
In-memory backend for the checkout demo and end-to-end tests.

Implements the two endpoints the checkout talks to:

    GET /api/check-auth   → {"isAuthenticated", "customerid", "customerAddress"}
    PUT /api/orders       → {"orderids": [...], "tracking_number"}

Sessions are a cookie named `session`. Failures can be forced through
`BackendStore.fail_with` to exercise the error path.

Run: uv run uvicorn examples.backend:app
"""

from __future__ import annotations

import asyncio
import itertools
import secrets
from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

from fastapi import APIRouter, Cookie, FastAPI, Request
from fastapi.responses import JSONResponse

from checkout.cart import ProductType
from checkout.gateway import OrderResult
from checkout.wire import CheckAuthResponse, OrderRequest, OrderResponse
from checkout.session import SessionInfo

SESSION_COOKIE = "session"


# ═══════════════════════════════════════════════════════════════════════════════
# Store
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Customer:
    id: int
    name: str
    address: str


@dataclass(frozen=True, slots=True)
class PlacedOrder:
    order_id: str
    customer_id: int
    product_type: ProductType
    amount: Decimal
    payment_method: str
    delivery_address: str
    tracking_number: str


@dataclass(slots=True)
class BackendStore:
    sessions: dict[str, Customer] = field(default_factory=dict)
    orders: list[PlacedOrder] = field(default_factory=list)
    fail_with: tuple[int, str | None] | None = None
    delay: float = 0.0
    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1001))

    def login(self, customer: Customer) -> str:
        token = secrets.token_hex(8)
        self.sessions[token] = customer
        return token

    def logout(self, token: str) -> None:
        self.sessions.pop(token, None)

    def customer(self, token: str | None) -> Customer | None:
        return self.sessions.get(token) if token else None

    def place(self, customer: Customer, request: OrderRequest) -> OrderResult:
        """One order per product type, sharing a tracking number."""
        tracking = f"TRK-{secrets.token_hex(4).upper()}"
        placed: list[str] = []
        for product_type in ProductType:
            lines = [line for line in request.items if line.product_type is product_type]
            if not lines:
                continue
            order_id = str(next(self._ids))
            amount = sum(
                (Decimal(line.price or 0) * (line.quantity or 0) for line in lines),
                Decimal(0),
            )
            self.orders.append(PlacedOrder(
                order_id=order_id,
                customer_id=customer.id,
                product_type=product_type,
                amount=amount,
                payment_method=request.payment_method.value,
                delivery_address=request.delivery_address,
                tracking_number=tracking,
            ))
            placed.append(order_id)
        return OrderResult(order_ids=tuple(placed), tracking_number=tracking)


def seed(store: BackendStore) -> str:
    """Log in the demo customer and return the session token."""
    return store.login(Customer(id=7, name="Maria Santos", address="12 Mabini St, Cebu City"))


# ═══════════════════════════════════════════════════════════════════════════════
# Routes
# ═══════════════════════════════════════════════════════════════════════════════

router = APIRouter(prefix="/api")


def _error(status_code: int, message: str | None) -> JSONResponse:
    body = {"error": message} if message is not None else {}
    return JSONResponse(status_code=status_code, content=body)


@router.get("/check-auth")
async def check_auth(request: Request, session: str | None = Cookie(default=None)) -> dict[str, object]:
    store: BackendStore = request.app.state.store
    customer = store.customer(session)
    if customer is None:
        info = SessionInfo(authenticated=False)
    else:
        info = SessionInfo(authenticated=True, customer_id=customer.id, delivery_address=customer.address)
    return CheckAuthResponse.from_domain(info).model_dump(mode="json", by_alias=True, exclude_none=True)


@router.put("/orders", response_model=None)
async def place_order(
    order: OrderRequest,
    request: Request,
    session: str | None = Cookie(default=None),
) -> dict[str, object] | JSONResponse:
    store: BackendStore = request.app.state.store
    if store.delay:
        await asyncio.sleep(store.delay)

    customer = store.customer(session)
    if customer is None:
        return _error(401, "Not authenticated")
    if str(customer.id) != str(order.customerid):
        return _error(403, "Customer mismatch")
    if store.fail_with is not None:
        status_code, message = store.fail_with
        return _error(status_code, message)
    if not order.items:
        return _error(400, "Order has no items")

    result = store.place(customer, order)
    return OrderResponse.from_domain(result).model_dump(mode="json")


def create_app(store: BackendStore | None = None) -> FastAPI:
    application = FastAPI(title="checkout demo backend")
    application.state.store = store or BackendStore()
    application.include_router(router)
    return application


app = create_app()
seed(app.state.store)


__all__ = (
    "SESSION_COOKIE",
    "Customer",
    "PlacedOrder",
    "BackendStore",
    "seed",
    "create_app",
    "app",
)
