"""Tests for the categorical filter/sort transforms."""

from __future__ import annotations

from decimal import Decimal

import pytest

from afterschool_catalog.domain import program_filters
from afterschool_catalog.domain.program_filters import UNKNOWN_MIN_AGE, extract_min_age
from afterschool_catalog.domain.program_search import filter_programs


@pytest.fixture()
def scenario_catalog(make_program) -> list:
    """Soccer Camp (30, 2 spots), Chess Masters (25, 5 spots), Art Class (45, sold out)."""
    return [
        make_program("Soccer Camp", price=Decimal("30"), spots_available=2),
        make_program("Chess Masters", price=Decimal("25"), spots_available=5),
        make_program("Art Class", price=Decimal("45"), spots_available=0),
    ]


def _titles(records: list) -> list[str]:
    return [record.title for record in records]


# ==============================================================================
# Scenario
# ==============================================================================


def test_available_keeps_open_programs_in_catalog_order(scenario_catalog: list) -> None:
    result = program_filters.apply(scenario_catalog, "available")

    assert _titles(result) == ["Soccer Camp", "Chess Masters"]


def test_by_price_sorts_cheapest_first(scenario_catalog: list) -> None:
    result = program_filters.apply(scenario_catalog, "by-price")

    assert _titles(result) == ["Chess Masters", "Soccer Camp", "Art Class"]


def test_search_ch_finds_only_chess(scenario_catalog: list) -> None:
    result = program_filters.apply(filter_programs(scenario_catalog, "ch"), "all")

    assert _titles(result) == ["Chess Masters"]


def test_all_is_identity(scenario_catalog: list) -> None:
    assert program_filters.apply(scenario_catalog, "all") == scenario_catalog


def test_unknown_filter_behaves_like_all(scenario_catalog: list) -> None:
    assert program_filters.apply(scenario_catalog, "by-color") == scenario_catalog


def test_free_programs_sort_first_by_price(make_program) -> None:
    catalog = [
        make_program("Robotics", price=Decimal("80.00")),
        make_program("Chess Club", price=Decimal("0.00")),
    ]

    assert _titles(program_filters.apply(catalog, "by-price")) == ["Chess Club", "Robotics"]


# ==============================================================================
# Age Sort
# ==============================================================================


@pytest.mark.parametrize(
    ("age_range", "expected"),
    [
        ("8-12 years", 8),
        ("6 - 10", 6),
        ("  5-8", 5),
        ("10+ years", 10),
        ("12", 12),
        ("All ages", UNKNOWN_MIN_AGE),
        ("Ages 6-10", UNKNOWN_MIN_AGE),
        ("", UNKNOWN_MIN_AGE),
        (None, UNKNOWN_MIN_AGE),
        ("-5 years", UNKNOWN_MIN_AGE),
    ],
)
def test_extract_min_age(age_range: str | None, expected: int) -> None:
    assert extract_min_age(age_range) == expected


def test_by_age_sorts_youngest_first(make_program) -> None:
    catalog = [
        make_program("Teen Robotics", age_range="12-16 years"),
        make_program("Tiny Tots", age_range="4-6 years"),
        make_program("Chess Club", age_range="8-14 years"),
    ]

    result = program_filters.apply(catalog, "by-age")

    assert _titles(result) == ["Tiny Tots", "Chess Club", "Teen Robotics"]


@pytest.mark.parametrize("size", [1, 5, 50])
def test_unparseable_age_sorts_after_every_parseable(make_program, size: int) -> None:
    """The 999 sentinel sorts last regardless of catalog size."""
    catalog = [make_program("Mystery Club", age_range="All ages")]
    catalog += [
        make_program(f"Program {index}", age_range=f"{index % 18}-{index % 18 + 4} years")
        for index in range(size)
    ]

    result = program_filters.apply(catalog, "by-age")

    assert result[-1].title == "Mystery Club"


def test_by_age_is_stable(make_program) -> None:
    """Ties keep catalog order."""
    catalog = [
        make_program("B", age_range="6-10"),
        make_program("A", age_range="6-12"),
        make_program("C", age_range="6"),
    ]

    assert _titles(program_filters.apply(catalog, "by-age")) == ["B", "A", "C"]
