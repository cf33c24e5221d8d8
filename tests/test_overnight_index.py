"""Tests for overnight index construction, equality and lookup."""

import pickle
from datetime import date

import pytest
import QuantLib as ql

from rateindex.conventions.calendars import TARGET, UK, Calendar
from rateindex.conventions.currency import Currency
from rateindex.conventions.daycount import ACT_360, ACT_365F
from rateindex.conventions.tenor import TENOR_1D
from rateindex.conventions.types import RateIndexType
from rateindex.index.base import RateIndex
from rateindex.index.errors import (
    IndexLookupError,
    IndexValidationError,
    InvalidArgumentError,
    RateIndexError,
)
from rateindex.index.overnight import OvernightIndex


def _full_builder():
    return (
        OvernightIndex.builder()
        .currency(Currency.GBP)
        .name("GBP-SONIA")
        .calendar(UK)
        .publication_date_offset(0)
        .effective_date_offset(0)
        .day_count(ACT_365F)
    )


class TestBuild:
    def test_fields(self, sonia):
        assert sonia.currency is Currency.GBP
        assert sonia.name == "GBP-SONIA"
        assert sonia.calendar is UK
        assert sonia.publication_date_offset == 0
        assert sonia.effective_date_offset == 0
        assert sonia.day_count is ACT_365F

    def test_type_and_tenor(self, sonia):
        assert sonia.type is RateIndexType.OVERNIGHT
        assert sonia.tenor == TENOR_1D
        assert str(sonia.tenor) == "1D"

    def test_is_rate_index(self, sonia):
        assert isinstance(sonia, RateIndex)

    def test_str_is_name(self, sonia):
        assert str(sonia) == "GBP-SONIA"

    def test_builder_matches_constructor(self, sonia):
        direct = OvernightIndex(
            currency=Currency.GBP,
            name="GBP-SONIA",
            calendar=UK,
            publication_date_offset=0,
            effective_date_offset=0,
            day_count=ACT_365F,
        )
        assert direct == sonia

    def test_to_builder_round_trip(self, sonia, estr):
        assert sonia.to_builder().build() == sonia
        assert estr.to_builder().build() == estr

    def test_to_builder_modification(self, sonia):
        modified = sonia.to_builder().publication_date_offset(1).build()
        assert modified.publication_date_offset == 1
        assert modified != sonia
        assert sonia.publication_date_offset == 0

    def test_frozen(self, sonia):
        with pytest.raises(AttributeError):
            sonia.name = "OTHER"  # type: ignore[misc]

    def test_any_currency(self):
        aonia = _full_builder().currency(Currency("AUD")).name("AUD-AONIA").build()
        assert aonia.currency == Currency.AUD
        assert aonia == aonia.to_builder().build()

    def test_negative_offset_accepted(self):
        index = _full_builder().effective_date_offset(-1).build()
        assert index.effective_date_offset == -1


class TestValidation:
    @pytest.mark.parametrize(
        "field",
        [
            "currency",
            "name",
            "calendar",
            "publication_date_offset",
            "effective_date_offset",
            "day_count",
        ],
    )
    def test_missing_field(self, field):
        builder = _full_builder()
        getattr(builder, field)(None)
        with pytest.raises(IndexValidationError) as exc_info:
            builder.build()
        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    def test_missing_currency(self):
        builder = (
            OvernightIndex.builder()
            .name("GBP-SONIA")
            .calendar(UK)
            .publication_date_offset(0)
            .effective_date_offset(0)
            .day_count(ACT_365F)
        )
        with pytest.raises(IndexValidationError) as exc_info:
            builder.build()
        assert exc_info.value.field == "currency"

    def test_empty_name(self):
        with pytest.raises(IndexValidationError) as exc_info:
            _full_builder().name("").build()
        assert exc_info.value.field == "name"

    def test_empty_builder(self):
        with pytest.raises(IndexValidationError):
            OvernightIndex.builder().build()

    def test_non_integer_offset(self):
        with pytest.raises(IndexValidationError) as exc_info:
            _full_builder().publication_date_offset(1.5).build()
        assert exc_info.value.field == "publication_date_offset"

    def test_bool_offset(self):
        with pytest.raises(IndexValidationError):
            _full_builder().effective_date_offset(True).build()

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            _full_builder().currency(None).build()
        with pytest.raises(RateIndexError):
            _full_builder().currency(None).build()


class TestEquality:
    def test_reflexive(self, sonia):
        assert sonia == sonia

    def test_symmetric_and_hash_consistent(self, sonia):
        other = _full_builder().build()
        assert sonia == other
        assert other == sonia
        assert hash(sonia) == hash(other)

    def test_transitive(self, sonia):
        second = _full_builder().build()
        third = second.to_builder().build()
        assert sonia == second and second == third
        assert sonia == third

    @pytest.mark.parametrize(
        "field, value",
        [
            ("currency", Currency.EUR),
            ("name", "GBP-SONIA-2"),
            ("calendar", TARGET),
            ("publication_date_offset", 1),
            ("effective_date_offset", 1),
            ("day_count", ACT_360),
        ],
    )
    def test_each_field_matters(self, sonia, field, value):
        builder = sonia.to_builder()
        getattr(builder, field)(value)
        assert builder.build() != sonia

    def test_not_equal_to_other_types(self, sonia):
        assert sonia != "GBP-SONIA"

    def test_hash_stable(self, sonia):
        first = hash(sonia)
        assert all(hash(sonia) == first for _ in range(5))

    def test_same_calendar_name_different_rules(self, sonia):
        weekends = sonia.to_builder().calendar(Calendar("CUSTOM", ql.WeekendsOnly())).build()
        target = sonia.to_builder().calendar(Calendar("CUSTOM", ql.TARGET())).build()
        assert weekends != target
        christmas_eve = date(2024, 12, 24)
        assert weekends.calculate_maturity_from_effective(christmas_eve) == date(2024, 12, 25)
        assert target.calculate_maturity_from_effective(christmas_eve) == date(2024, 12, 27)

    def test_usable_in_sets(self, sonia, estr):
        indices = {sonia, estr, _full_builder().build()}
        assert len(indices) == 2


class TestPickle:
    def test_round_trip(self, sonia):
        hash(sonia)
        restored = pickle.loads(pickle.dumps(sonia))
        assert restored == sonia
        assert hash(restored) == hash(sonia)
        assert restored.calendar is UK
        assert restored.day_count is ACT_365F

    def test_unregistered_calendar_fails_when_pickling(self, sonia):
        index = sonia.to_builder().calendar(Calendar("London", ql.UnitedKingdom())).build()
        with pytest.raises(pickle.PicklingError):
            pickle.dumps(index)


class TestOf:
    def test_lookup(self, registry, sonia):
        assert OvernightIndex.of("GBP-SONIA", registry) is sonia

    def test_default_registry(self, default_registry, estr):
        assert OvernightIndex.of("EUR-ESTR") is estr

    def test_unknown_name(self, registry):
        with pytest.raises(IndexLookupError) as exc_info:
            OvernightIndex.of("UNKNOWN-INDEX-X", registry)
        assert exc_info.value.name == "UNKNOWN-INDEX-X"

    def test_unknown_name_is_lookup_error(self, default_registry):
        with pytest.raises(LookupError):
            OvernightIndex.of("UNKNOWN-INDEX-X")

    @pytest.mark.parametrize("name", [None, ""])
    def test_none_or_empty_name(self, registry, name):
        with pytest.raises(InvalidArgumentError) as exc_info:
            OvernightIndex.of(name, registry)
        assert exc_info.value.argument == "unique_name"
