"""
Base class for rate indices.
"""

from abc import ABC, abstractmethod
from datetime import date

from rateindex.conventions.currency import Currency
from rateindex.conventions.daycount import DayCountConvention
from rateindex.conventions.tenor import Tenor
from rateindex.conventions.types import RateIndexType


class RateIndex(ABC):
    """An index of interest rates, such as an overnight or an IBOR index.

    The index is defined by four dates. The fixing date is the date on which
    the index is observed, the publication date is when the fixed rate is
    actually published, the effective date is when the implied deposit
    starts and the maturity date is when it ends.
    """

    name: str
    currency: Currency
    day_count: DayCountConvention

    @property
    @abstractmethod
    def type(self) -> RateIndexType:
        """Kind of index."""

    @property
    @abstractmethod
    def tenor(self) -> Tenor:
        """Tenor of the implied deposit."""

    @abstractmethod
    def calculate_publication_from_fixing(self, fixing_date: date) -> date:
        """Calculate the publication date from the fixing date."""

    @abstractmethod
    def calculate_effective_from_fixing(self, fixing_date: date) -> date:
        """Calculate the effective date from the fixing date."""

    @abstractmethod
    def calculate_fixing_from_effective(self, effective_date: date) -> date:
        """Calculate the fixing date from the effective date."""

    @abstractmethod
    def calculate_maturity_from_effective(self, effective_date: date) -> date:
        """Calculate the maturity date from the effective date."""
