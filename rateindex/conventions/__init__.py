"""Market conventions: calendars, day counts, tenors and enums."""

from .calendars import CALENDARS, Calendar, get_calendar
from .daycount import DAY_COUNT_CONVENTIONS, DayCountConvention, get_day_count_convention
from .tenor import TENOR_1D, Tenor
from .currency import Currency
from .types import CalendarType, RateIndexType

__all__ = [
    "Calendar",
    "CALENDARS",
    "get_calendar",
    "DayCountConvention",
    "DAY_COUNT_CONVENTIONS",
    "get_day_count_convention",
    "Tenor",
    "TENOR_1D",
    "CalendarType",
    "Currency",
    "RateIndexType",
]
