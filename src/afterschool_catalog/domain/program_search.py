"""Word-boundary, case-insensitive prefix search over program titles."""

from __future__ import annotations

import re
from collections.abc import Iterable

from afterschool_catalog.domain.program import ProgramRecord

# Anything that is not a letter or digit separates tokens ("Soccer & Art" -> soccer, art)
_TOKEN_SEPARATOR = re.compile(r"[\W_]+", re.UNICODE)


def title_tokens(title: str) -> list[str]:
    return [token for token in _TOKEN_SEPARATOR.split(title.lower()) if token]


def matches(record: ProgramRecord, search_text: str) -> bool:
    """
    Decide whether a program matches a search term.

    Empty search matches everything. Otherwise true if any lower-cased title
    token starts with the lower-cased search text. The description is never
    searched, so "art" does not surface a program that mentions "particular".
    """
    if not search_text:
        return True

    needle = search_text.lower()
    return any(token.startswith(needle) for token in title_tokens(record.title))


def filter_programs(records: Iterable[ProgramRecord], search_text: str) -> list[ProgramRecord]:
    """Keep matching records, preserving incoming order."""
    return [record for record in records if matches(record, search_text)]
