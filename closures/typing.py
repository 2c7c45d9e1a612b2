"""Typing Helpers"""

__all__ = ("OrdinalConverter", "Supplier")

from typing import Protocol
from typing_extensions import TypeVar

R = TypeVar("R", covariant=True)


class OrdinalConverter(Protocol):
    """Convert a 1-based ordinal to its text, or None when out of range"""

    def __call__(self, __num: int) -> str | None:
        ...


class Supplier(Protocol[R]):
    """Zero argument value supplier"""

    def __call__(self) -> R:
        ...
