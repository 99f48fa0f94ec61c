"""
Codec protocols — a wire model knows how to become a domain value and back.
"""

from typing import Protocol


class ToDomain[T](Protocol):
    """Parsed payload that converts to a domain value."""

    def to_domain(self) -> T: ...


class FromDomain[T](Protocol):
    """Payload that can be built from a domain value before sending."""

    @classmethod
    def from_domain(cls, dom: T) -> "FromDomain[T]": ...


__all__ = ("ToDomain", "FromDomain")
