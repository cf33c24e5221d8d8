"""Shared fixtures for rateindex tests."""

from __future__ import annotations

import pytest

from rateindex.conventions.calendars import TARGET, UK, WEEKEND_ONLY
from rateindex.conventions.daycount import ACT_360, ACT_365F
from rateindex.conventions.currency import Currency
from rateindex.index.overnight import OvernightIndex
from rateindex.index.registry import (
    RateIndexRegistry,
    get_default_registry,
    set_default_registry,
)


@pytest.fixture
def sonia() -> OvernightIndex:
    """GBP overnight index on London business days, T/N offsets of zero."""
    return (
        OvernightIndex.builder()
        .currency(Currency.GBP)
        .name("GBP-SONIA")
        .calendar(UK)
        .publication_date_offset(0)
        .effective_date_offset(0)
        .day_count(ACT_365F)
        .build()
    )


@pytest.fixture
def estr() -> OvernightIndex:
    """EUR overnight index published the next TARGET business day."""
    return OvernightIndex(
        currency=Currency.EUR,
        name="EUR-ESTR",
        calendar=TARGET,
        publication_date_offset=1,
        effective_date_offset=0,
        day_count=ACT_360,
    )


@pytest.fixture
def weekend_index() -> OvernightIndex:
    """Index whose calendar only excludes weekends."""
    return OvernightIndex(
        currency=Currency.USD,
        name="USD-TEST-ON",
        calendar=WEEKEND_ONLY,
        publication_date_offset=0,
        effective_date_offset=0,
        day_count=ACT_360,
    )


@pytest.fixture
def tomorrow_next_index() -> OvernightIndex:
    """Index settling one business day after fixing."""
    return OvernightIndex(
        currency=Currency.CHF,
        name="CHF-TN-TEST",
        calendar=WEEKEND_ONLY,
        publication_date_offset=0,
        effective_date_offset=1,
        day_count=ACT_360,
    )


@pytest.fixture
def registry(sonia, estr) -> RateIndexRegistry:
    return RateIndexRegistry([sonia, estr])


@pytest.fixture
def default_registry(registry):
    """Install ``registry`` as the default registry for the test."""
    previous = get_default_registry()
    set_default_registry(registry)
    yield registry
    set_default_registry(previous)
