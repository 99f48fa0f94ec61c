"""
Wire — convert backend JSON payloads to domain values and back.

    from checkout import wire as W

    info = W.CheckAuthResponse.model_validate(response.json()).to_domain()
    body = W.OrderRequest.from_domain(order).to_wire()
    result = W.OrderResponse.model_validate(response.json()).to_domain()
"""

from checkout.wire._codec import (
    ToDomain,
    FromDomain,
)
from checkout.wire._payloads import (
    CheckAuthResponse,
    OrderLineRequest,
    OrderRequest,
    OrderResponse,
    ErrorResponse,
)

__all__ = (
    # Protocols
    "ToDomain",
    "FromDomain",
    # Payloads
    "CheckAuthResponse",
    "OrderLineRequest",
    "OrderRequest",
    "OrderResponse",
    "ErrorResponse",
)
