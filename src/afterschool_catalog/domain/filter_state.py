"""
Query normalization and URL-state synchronization for program discovery.

The normalizer is the single seam where untyped request parameters become a
strictly-typed FilterState. No other component accepts raw request maps.

URL parameters:
    q       search text (optional, absent = empty)
    filter  one of FILTER_IDS (optional, absent or invalid = "all")

Anything else in the mapping is ignored, never rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from afterschool_catalog.domain.discovery import (
    FILTER_ALL,
    FILTER_IDS,
    MAX_SEARCH_LENGTH,
    FilterState,
)

SEARCH_PARAM = "q"
FILTER_PARAM = "filter"


def normalize(raw_params: Mapping[str, Any] | FilterState | None) -> FilterState:
    """
    Turn raw, untrusted parameters into a canonical FilterState.

    Never raises: an invalid filter collapses to "all" and overlong search
    text is truncated. The pagination cursor is always reset to 0.

    Accepts a FilterState too, so that normalize(normalize(x)) == normalize(x).
    """
    if raw_params is None:
        raw_params = {}
    elif isinstance(raw_params, FilterState):
        raw_params = {SEARCH_PARAM: raw_params.search_text, FILTER_PARAM: raw_params.active_filter}

    return FilterState(
        search_text=sanitize_search(raw_params.get(SEARCH_PARAM)),
        active_filter=validate_filter(raw_params.get(FILTER_PARAM)),
    )


def sanitize_search(value: Any) -> str:
    text = _as_text(value).strip()
    # Strip again: truncation may expose trailing whitespace
    return text[:MAX_SEARCH_LENGTH].strip()


def validate_filter(value: Any) -> str:
    filter_id = _as_text(value)
    return filter_id if filter_id in FILTER_IDS else FILTER_ALL


def _as_text(value: Any) -> str:
    # Repeated query params arrive as lists; first one wins
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


# ==============================================================================
# View-State Synchronizer
# ==============================================================================


def to_query_params(state: FilterState) -> dict[str, str]:
    """Emit the shareable URL parameters. Default values are omitted."""
    params: dict[str, str] = {}
    if state.search_text:
        params[SEARCH_PARAM] = state.search_text
    if state.active_filter != FILTER_ALL:
        params[FILTER_PARAM] = state.active_filter
    return params


def from_query_params(params: Mapping[str, Any]) -> FilterState:
    """Parse URL parameters back into a FilterState (absent = default)."""
    return normalize(params)


def to_query_string(state: FilterState) -> str:
    """URL-encoded query string, empty when every value is a default."""
    return urlencode(to_query_params(state))


def listing_path(state: FilterState, base: str = "/programs") -> str:
    query = to_query_string(state)
    return f"{base}?{query}" if query else base
