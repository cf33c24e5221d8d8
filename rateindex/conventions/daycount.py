"""
QuantLib-backed day count conventions.

An index only stores its convention for use by pricing code; the
conventions here expose year fractions and day counts for that purpose.
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


class DayCountConvention:
    """Day count convention wrapping a QuantLib day counter."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> float:
        """Calculate year fraction between two dates."""
        return self._ql_daycount.yearFraction(_to_ql_date(start), _to_ql_date(end))

    def day_count(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Calculate number of days between two dates."""
        return self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))

    def __eq__(self, other):
        if not isinstance(other, DayCountConvention):
            return NotImplemented
        return self.name == other.name and self._ql_daycount == other._ql_daycount

    def __hash__(self):
        return hash((DayCountConvention, self.name))

    def __reduce__(self):
        if DAY_COUNT_CONVENTIONS.get(self.name.upper()) is not self:
            raise pickle.PicklingError(
                f"Day count {self.name!r} is not a registered convention and cannot be pickled"
            )
        return get_day_count_convention, (self.name,)

    def __repr__(self) -> str:
        return f"DayCountConvention({self.name!r})"

    def __str__(self) -> str:
        return self.name


# Pre-defined day count convention instances
ACT_360 = DayCountConvention("ACT/360", ql.Actual360())
ACT_365F = DayCountConvention("ACT/365F", ql.Actual365Fixed())
ACT_ACT = DayCountConvention("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))
THIRTY_360E = DayCountConvention("30E/360", ql.Thirty360(ql.Thirty360.European))

# Registry
DAY_COUNT_CONVENTIONS = {
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "ACT/ACT": ACT_ACT,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
    "30E/360": THIRTY_360E,
    "30/360 EUROPEAN": THIRTY_360E,
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    name_upper = name.upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
