"""
Client — HTTP implementations of the session and gateway capabilities.

    import httpx
    from checkout import client as H

    async with httpx.AsyncClient() as http:
        verifier = H.HTTPSessionVerifier(http, config)
        gateway = H.HTTPOrderGateway(http, config)
"""

from checkout.client._session import HTTPSessionVerifier
from checkout.client._gateway import HTTPOrderGateway

__all__ = (
    "HTTPSessionVerifier",
    "HTTPOrderGateway",
)
