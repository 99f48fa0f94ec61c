"""
Gateway — order payload, order result, and the submission capability.

    from checkout import gateway as G

    order = G.OrderSubmission.build(
        customer_id=session.customer_id,
        items=items,
        totals=totals,
        payment_method=PaymentMethod.COD,
        delivery_address="12 Rizal St",
    )
    result = await order_gateway.submit(order)
"""

from checkout.gateway._types import (
    OrderLine,
    OrderSubmission,
    OrderResult,
    GatewayError,
    OrderGateway,
)

__all__ = (
    "OrderLine",
    "OrderSubmission",
    "OrderResult",
    "GatewayError",
    "OrderGateway",
)
