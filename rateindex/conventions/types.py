"""
Basic types and enums used across the index definitions.
"""

from enum import Enum


class RateIndexType(Enum):
    """Kind of rate index."""

    OVERNIGHT = "OVERNIGHT"
    IBOR = "IBOR"


class CalendarType(Enum):
    """Predefined calendars."""

    TARGET = "TARGET"
    UK = "UK"
    USNY = "USNY"
    JPTO = "JPTO"
    CHZU = "CHZU"
    WEEKEND = "WEEKEND"
