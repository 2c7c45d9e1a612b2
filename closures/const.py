"""Constants"""
from __future__ import annotations

from typing import Final

FIRST_ORDINAL: Final = 1

WEEKDAYS: Final = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DAYS_IN_WEEK: Final = len(WEEKDAYS)
