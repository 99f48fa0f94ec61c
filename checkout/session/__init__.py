"""
Session — authentication check results and the verifier capability.

    from checkout import session as A

    match await verifier.verify():
        case Ok(A.SessionInfo(authenticated=True, customer_id=cid)):
            ...
        case Ok(_):
            ...  # not logged in
        case Error(A.SessionError(message=msg)):
            ...  # check failed
"""

from checkout.session._types import (
    CustomerId,
    SessionInfo,
    SessionError,
    SessionVerifier,
)

__all__ = (
    "CustomerId",
    "SessionInfo",
    "SessionError",
    "SessionVerifier",
)
