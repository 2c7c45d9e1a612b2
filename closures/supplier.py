"""value suppliers"""

from operator import add
from typing import TypeVar

from .partial import partial
from .typing import Supplier

_T = TypeVar("_T")


def constant(value: _T) -> Supplier[_T]:
    """supplier that always returns value"""

    def supply() -> _T:
        return value

    return supply


def successor(last: int = 0) -> Supplier[int]:
    """supplier of the number after last, which does not advance between calls"""

    next_of = partial(add, last)
    return lambda: next_of(1)
