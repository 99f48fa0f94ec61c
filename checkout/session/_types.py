"""
Session types — who is checking out, as the backend reports it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from kungfu import Result

type CustomerId = str | int
"""Opaque customer identifier. Never interpreted, only passed back."""


@dataclass(frozen=True, slots=True)
class SessionInfo:
    """
    Result of a session check.

    customer_id is present only when authenticated.
    """

    authenticated: bool
    customer_id: CustomerId | None = None
    delivery_address: str = ""


@dataclass(frozen=True, slots=True)
class SessionError:
    """The session check itself failed (transport, non-2xx, bad payload)."""

    message: str
    status_code: int | None = None
    cause: Exception | None = None


class SessionVerifier(Protocol):
    """
    Confirms the caller is authenticated.

    An unauthenticated caller is Ok(SessionInfo(authenticated=False)),
    not an Error: the check worked, the answer is "no".
    """

    async def verify(self) -> Result[SessionInfo, SessionError]:
        ...


__all__ = (
    "CustomerId",
    "SessionInfo",
    "SessionError",
    "SessionVerifier",
)
