"""
Categorical filter/sort transforms for the program listing.

Exactly one transform applies per evaluation. Search narrows the candidate
set first; the transform then filters or orders what remains. Sorts are
stable, so ties keep catalog order.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from afterschool_catalog.domain.discovery import (
    FILTER_ALL,
    FILTER_AVAILABLE,
    FILTER_BY_AGE,
    FILTER_BY_PRICE,
)
from afterschool_catalog.domain.program import ProgramRecord

# Records whose age range cannot be parsed sort after every parseable one
UNKNOWN_MIN_AGE = 999

_LEADING_INT = re.compile(r"\d+")


def extract_min_age(age_range: str | None) -> int:
    """
    Minimum age from free-form age-range text ("8-12 years" -> 8).

    Takes the text before the first "-", trims it and parses a leading
    integer. Any failure yields UNKNOWN_MIN_AGE instead of raising.
    """
    if not age_range:
        return UNKNOWN_MIN_AGE

    head = age_range.split("-", 1)[0].strip()
    match = _LEADING_INT.match(head)
    if match is None:
        return UNKNOWN_MIN_AGE
    return int(match.group())


def _all(records: Sequence[ProgramRecord]) -> list[ProgramRecord]:
    return list(records)


def _available(records: Sequence[ProgramRecord]) -> list[ProgramRecord]:
    return [record for record in records if record.spots_available > 0]


def _by_age(records: Sequence[ProgramRecord]) -> list[ProgramRecord]:
    return sorted(records, key=lambda record: extract_min_age(record.age_range))


def _by_price(records: Sequence[ProgramRecord]) -> list[ProgramRecord]:
    # Free programs have price 0 and therefore sort first
    return sorted(records, key=lambda record: record.price)


_TRANSFORMS: dict[str, Callable[[Sequence[ProgramRecord]], list[ProgramRecord]]] = {
    FILTER_ALL: _all,
    FILTER_AVAILABLE: _available,
    FILTER_BY_AGE: _by_age,
    FILTER_BY_PRICE: _by_price,
}


def apply(records: Sequence[ProgramRecord], active_filter: str) -> list[ProgramRecord]:
    """Apply one categorical transform. Unknown ids behave like "all"."""
    transform = _TRANSFORMS.get(active_filter, _all)
    return transform(records)
