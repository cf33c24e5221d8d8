"""
Overnight rate index, such as GBP-SONIA or EUR-ESTR.

An index of this kind relates to lending over one night. The rate typically
refers to "Today/Tomorrow" but might refer to "Tomorrow/Next", which is
captured by the effective date offset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from rateindex.conventions.calendars import Calendar
from rateindex.conventions.currency import Currency
from rateindex.conventions.daycount import DayCountConvention
from rateindex.conventions.tenor import TENOR_1D, Tenor
from rateindex.conventions.types import RateIndexType

from .base import RateIndex
from .errors import IndexValidationError, InvalidArgumentError
from .registry import RateIndexRegistry, get_default_registry

logger = logging.getLogger(__name__)

_OFFSET_FIELDS = ("publication_date_offset", "effective_date_offset")


def _require_date(value, argument: str) -> date:
    if value is None:
        raise InvalidArgumentError(argument)
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class OvernightIndex(RateIndex):
    """
    An overnight index.

    Attributes:
        currency: Currency of the index
        name: Unique index name, such as 'GBP-SONIA'
        calendar: Calendar used for every date calculation of the index
        publication_date_offset: Business days from fixing to publication,
            zero if the rate is published on the fixing date, one if it is
            published the next business day
        effective_date_offset: Business days from fixing to the start of the
            implied deposit, usually zero or one
        day_count: Day count convention of the rate
    """

    currency: Currency
    name: str
    calendar: Calendar
    publication_date_offset: int
    effective_date_offset: int
    day_count: DayCountConvention
    _hash: Optional[int] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.currency is None:
            raise IndexValidationError("currency")
        if not self.name:
            raise IndexValidationError("name", "Index field 'name' must not be empty")
        if self.calendar is None:
            raise IndexValidationError("calendar")
        for offset_field in _OFFSET_FIELDS:
            value = getattr(self, offset_field)
            if value is None:
                raise IndexValidationError(offset_field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise IndexValidationError(
                    offset_field,
                    f"Index field '{offset_field}' must be an integer, got {value!r}",
                )
        if self.day_count is None:
            raise IndexValidationError("day_count")
        logger.debug("Created overnight index %s on calendar %s", self.name, self.calendar)

    @classmethod
    def of(
        cls, unique_name: str, registry: Optional[RateIndexRegistry] = None
    ) -> OvernightIndex:
        """
        Obtain an index from its unique name.

        Args:
            unique_name: Unique index name
            registry: Registry to search, the default registry if omitted

        Raises:
            InvalidArgumentError: If the name is None or empty
            IndexLookupError: If no overnight index has the name
        """
        if not unique_name:
            raise InvalidArgumentError("unique_name")
        if registry is None:
            registry = get_default_registry()
        return registry.lookup(unique_name, cls)

    @staticmethod
    def builder() -> OvernightIndexBuilder:
        return OvernightIndexBuilder()

    def to_builder(self) -> OvernightIndexBuilder:
        """Builder populated with the fields of this index."""
        return (
            OvernightIndexBuilder()
            .currency(self.currency)
            .name(self.name)
            .calendar(self.calendar)
            .publication_date_offset(self.publication_date_offset)
            .effective_date_offset(self.effective_date_offset)
            .day_count(self.day_count)
        )

    @property
    def type(self) -> RateIndexType:
        return RateIndexType.OVERNIGHT

    @property
    def tenor(self) -> Tenor:
        """Always one day."""
        return TENOR_1D

    # Inputs that are not valid fixing or effective dates are not rejected:
    # they are first moved to the next business day and then processed.

    def calculate_publication_from_fixing(self, fixing_date: date) -> date:
        """Publication date of the rate observed on the fixing date."""
        fixing_date = _require_date(fixing_date, "fixing_date")
        return self._shift_from(fixing_date, self.publication_date_offset)

    def calculate_effective_from_fixing(self, fixing_date: date) -> date:
        """Start date of the deposit implied by the fixing date."""
        fixing_date = _require_date(fixing_date, "fixing_date")
        return self._shift_from(fixing_date, self.effective_date_offset)

    def calculate_fixing_from_effective(self, effective_date: date) -> date:
        """
        Fixing date of the deposit starting on the effective date.

        This is not an exact inverse of ``calculate_effective_from_fixing``:
        a non-business-day input is moved forward before shifting back, so
        it does not round-trip to itself.
        """
        effective_date = _require_date(effective_date, "effective_date")
        return self._shift_from(effective_date, -self.effective_date_offset)

    def calculate_maturity_from_effective(self, effective_date: date) -> date:
        """End date of the deposit, one business day after the effective date."""
        effective_date = _require_date(effective_date, "effective_date")
        return self._shift_from(effective_date, 1)

    def _shift_from(self, dt: date, days: int) -> date:
        start = self.calendar.next_or_same(dt)
        result = self.calendar.shift(start, days)
        logger.debug(
            "%s: %s adjusted to %s, shifted %s business days to %s",
            self.name, dt, start, days, result,
        )
        return result

    def __hash__(self):
        cached = self._hash
        if cached is None:
            cached = hash(
                (
                    self.currency,
                    self.name,
                    self.calendar,
                    self.publication_date_offset,
                    self.effective_date_offset,
                    self.day_count,
                )
            )
            # Same value whichever caller stores it first
            object.__setattr__(self, "_hash", cached)
        return cached

    def __getstate__(self):
        state = dict(self.__dict__)
        state["_hash"] = None  # string hashes differ between processes
        return state

    def __str__(self) -> str:
        return self.name


class OvernightIndexBuilder:
    """Collects the fields of an overnight index; validation happens in ``build``."""

    def __init__(self):
        self._currency = None
        self._name = None
        self._calendar = None
        self._publication_date_offset = None
        self._effective_date_offset = None
        self._day_count = None

    def currency(self, currency: Currency) -> OvernightIndexBuilder:
        self._currency = currency
        return self

    def name(self, name: str) -> OvernightIndexBuilder:
        self._name = name
        return self

    def calendar(self, calendar: Calendar) -> OvernightIndexBuilder:
        self._calendar = calendar
        return self

    def publication_date_offset(self, offset: int) -> OvernightIndexBuilder:
        self._publication_date_offset = offset
        return self

    def effective_date_offset(self, offset: int) -> OvernightIndexBuilder:
        self._effective_date_offset = offset
        return self

    def day_count(self, day_count: DayCountConvention) -> OvernightIndexBuilder:
        self._day_count = day_count
        return self

    def build(self) -> OvernightIndex:
        """
        Create the index.

        Raises:
            IndexValidationError: If a required field is missing or empty
        """
        return OvernightIndex(
            currency=self._currency,
            name=self._name,
            calendar=self._calendar,
            publication_date_offset=self._publication_date_offset,
            effective_date_offset=self._effective_date_offset,
            day_count=self._day_count,
        )
