"""Closure factories"""

from .curry import curried, curry
from .errors import InvalidArgumentError
from .lookup import ordinal_lookup, weekday_text
from .partial import PartialApplication, partial
from .supplier import constant, successor

__all__ = (
    "InvalidArgumentError",
    "PartialApplication",
    "constant",
    "curried",
    "curry",
    "ordinal_lookup",
    "partial",
    "successor",
    "weekday_text",
)
