"""Ordinal lookup converters"""

from __future__ import annotations

import logging
from typing import Iterable

from .const import DAYS_IN_WEEK, FIRST_ORDINAL, WEEKDAYS
from .errors import InvalidArgumentError
from .typing import OrdinalConverter

_LOGGER = logging.getLogger(__name__)


def ordinal_lookup(table: Iterable[str]) -> OrdinalConverter:
    """converter from a 1-based ordinal to the matching entry of table"""

    if table is None:
        raise InvalidArgumentError("table", "table is not defined")
    entries = tuple(table)
    _LOGGER.debug("Creating ordinal lookup over %d entries", len(entries))

    def convert(num: int) -> str | None:
        if isinstance(num, bool) or not isinstance(num, int):
            return None
        if FIRST_ORDINAL <= num < FIRST_ORDINAL + len(entries):
            return entries[num - FIRST_ORDINAL]
        return None

    return convert


def weekday_text(weekdays: Iterable[str] = WEEKDAYS) -> OrdinalConverter:
    """converter from day of week number to its name"""

    if weekdays is None:
        raise InvalidArgumentError("weekdays", "weekdays is not defined")
    weekdays = tuple(weekdays)
    if len(weekdays) != DAYS_IN_WEEK:
        raise InvalidArgumentError(
            "weekdays", f"expected {DAYS_IN_WEEK} weekdays, got {len(weekdays)}"
        )
    return ordinal_lookup(weekdays)
