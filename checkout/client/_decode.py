"""
Response decoding shared by the HTTP clients.
"""

from __future__ import annotations

from typing import Any, cast

import httpx
from kungfu import Result, Ok, Error
from pydantic import BaseModel, ValidationError

from checkout.wire import ErrorResponse, ToDomain


def decode[T](response: httpx.Response, codec: type[ToDomain[T]]) -> Result[T, Exception]:
    """Validate a JSON body with a wire codec and convert it to a domain value."""
    try:
        payload = cast(type[BaseModel], codec).model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        return Error(exc)
    return Ok(cast(ToDomain[T], payload).to_domain())


def server_message(response: httpx.Response) -> str | None:
    """The backend's `error` text, if the body carries one."""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    try:
        return ErrorResponse.model_validate(body).message
    except ValidationError:
        return None


__all__ = ("decode", "server_message")
