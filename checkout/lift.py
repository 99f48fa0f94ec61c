"""
Lift — Helpers for lifting values into checkout computations.

Re-exports from combinators.lift with checkout-specific additions.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult, Result, Ok, Error
from combinators import flow, TimeoutError as CombinatorTimeout

# Re-export everything from combinators.lift
from combinators.lift import (
    pure,
    fail,
    catching_async,
    wrap_async,
    lifted,
    call,
    call_catching,
    from_result,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Checkout-specific helpers
# ═══════════════════════════════════════════════════════════════════════════════

def bounded[T, E](
    computation: LazyCoroResult[T, E],
    *,
    seconds: float,
    on_timeout: Callable[[float], E],
) -> LazyCoroResult[T, E]:
    """
    Run computation with a deadline.

    On expiry the pending computation is cancelled and the result is
    Error(on_timeout(seconds)), so callers see one error type.

    Example:
        submit = bounded(
            gateway.submit(order),
            seconds=30,
            on_timeout=lambda s: GatewayError(f"timed out after {s}s"),
        )
    """
    timed = flow(computation).timeout(seconds=seconds).compile()

    async def _run() -> Result[T, E]:
        match await timed:
            case Ok(value):
                return Ok(value)
            case Error(CombinatorTimeout() as exc):
                return Error(on_timeout(exc.seconds))
            case Error(err):
                return Error(err)  # type: ignore[arg-type]

    return LazyCoroResult(_run)


__all__ = (
    # From combinators.lift
    "pure",
    "fail",
    "catching_async",
    "wrap_async",
    "lifted",
    "call",
    "call_catching",
    "from_result",
    # Checkout additions
    "bounded",
)
