"""
QuantLib-backed holiday calendars.

Every date calculation of a rate index is delegated to one of these
calendars. Instances are shared, read-only and compared by name.
"""

import pickle
from datetime import date, datetime
from typing import Union

import QuantLib as ql


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Business day calendar wrapping a QuantLib calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday (weekends included)."""
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def next_or_same(self, dt: Union[date, datetime]) -> date:
        """Return the first business day on or after the date."""
        ql_result = self._ql_calendar.adjust(_to_ql_date(dt), ql.Following)
        return _to_py_date(ql_result)

    def shift(self, dt: Union[date, datetime], days: int) -> date:
        """Move a number of business days, forward if positive, backward if negative.

        A zero shift of a non-business day returns the following business day.
        """
        ql_result = self._ql_calendar.advance(_to_ql_date(dt), days, ql.Days)
        return _to_py_date(ql_result)

    def business_days_between(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Count business days between two dates (exclusive of start, inclusive of end)."""
        ql_start = _to_ql_date(start)
        ql_end = _to_ql_date(end)
        if ql_start >= ql_end:
            return 0
        return self._ql_calendar.businessDaysBetween(ql_start, ql_end, False, True)

    def __eq__(self, other):
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name and self._ql_calendar == other._ql_calendar

    def __hash__(self):
        return hash((Calendar, self.name))

    def __reduce__(self):
        # SWIG calendars do not pickle; only registered instances are restored by name
        if CALENDARS.get(self.name.upper()) is not self:
            raise pickle.PicklingError(
                f"Calendar {self.name!r} is not a registered calendar and cannot be pickled"
            )
        return get_calendar, (self.name,)

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"

    def __str__(self) -> str:
        return self.name


# Pre-defined calendar instances
TARGET = Calendar("TARGET", ql.TARGET())
UK = Calendar("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))
USNY = Calendar("USNY", ql.UnitedStates(ql.UnitedStates.GovernmentBond))
JPTO = Calendar("JPTO", ql.Japan())
CHZU = Calendar("CHZU", ql.Switzerland())
WEEKEND_ONLY = Calendar("WEEKEND", ql.WeekendsOnly())

# Calendar registry
CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "UK": UK,
    "GBLO": UK,  # Alias
    "USNY": USNY,
    "JPTO": JPTO,
    "CHZU": CHZU,
    "WEEKEND": WEEKEND_ONLY,
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by name (e.g. "TARGET", "UK", "USNY", "WEEKEND")."""
    key = name.value if hasattr(name, "value") else name
    key = key.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
