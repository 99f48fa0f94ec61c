"""
HTTP session verifier — GET /api/check-auth.
"""

from __future__ import annotations

import httpx
from kungfu import Result, Ok, Error
from checkout import lift as L

from checkout.config import CheckoutConfig
from checkout.logging import get_logger
from checkout.session import SessionError, SessionInfo
from checkout.wire import CheckAuthResponse
from checkout.client._decode import decode

logger = get_logger(__name__)


class HTTPSessionVerifier:
    """
    Asks the backend whether the client's session is authenticated.

    The httpx client carries the session cookie; this class never sees it.

    Example:
        async with httpx.AsyncClient(cookies=jar) as client:
            verifier = HTTPSessionVerifier(client, CheckoutConfig.from_env())
            result = await verifier.verify()
    """

    def __init__(self, client: httpx.AsyncClient, config: CheckoutConfig | None = None) -> None:
        self._client = client
        self._config = config or CheckoutConfig()

    @property
    def url(self) -> str:
        return f"{self._config.base_url}{self._config.check_auth_path}"

    async def verify(self) -> Result[SessionInfo, SessionError]:
        sent = await L.catching_async(
            lambda: self._client.get(self.url),
            on_error=lambda e: SessionError(f"Session check failed: {e}", cause=e),
        )

        match sent:
            case Error(err):
                logger.warning("session_check_unreachable", url=self.url, error=err.message)
                return Error(err)
            case Ok(response) if response.is_error:
                logger.warning("session_check_rejected", url=self.url, status=response.status_code)
                return Error(SessionError(
                    f"Session check returned {response.status_code}",
                    status_code=response.status_code,
                ))
            case Ok(response):
                match decode(response, CheckAuthResponse):
                    case Ok(info):
                        return Ok(info)
                    case Error(exc):
                        return Error(SessionError(
                            "Malformed session response",
                            status_code=response.status_code,
                            cause=exc,
                        ))


__all__ = ("HTTPSessionVerifier",)
