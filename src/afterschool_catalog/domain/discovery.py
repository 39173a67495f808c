"""Value objects of the program discovery flow."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

# ==============================================================================
# Closed set of categorical filters
# ==============================================================================

FILTER_ALL = "all"
FILTER_AVAILABLE = "available"
FILTER_BY_AGE = "by-age"
FILTER_BY_PRICE = "by-price"

FILTER_IDS: tuple[str, ...] = (FILTER_ALL, FILTER_AVAILABLE, FILTER_BY_AGE, FILTER_BY_PRICE)

# Labels for the filter pills, in display order
FILTER_LABELS: dict[str, str] = {
    FILTER_ALL: "All Programs",
    FILTER_AVAILABLE: "Available",
    FILTER_BY_AGE: "By Age",
    FILTER_BY_PRICE: "By Price",
}

MAX_SEARCH_LENGTH = 100


@dataclass(frozen=True, slots=True)
class FilterState:
    """
    Canonical discovery state of one browsing session.

    Invariants (guaranteed when built through the query normalizer):
    - active_filter is one of FILTER_IDS
    - search_text is trimmed and at most MAX_SEARCH_LENGTH characters
    """

    search_text: str = ""
    active_filter: str = FILTER_ALL
    offset: int = 0
    pages_loaded: int = 0

    def with_next_page(self, page_size: int) -> FilterState:
        """Extend in place for "load more": cursor advances, search/filter unchanged."""
        return replace(
            self,
            offset=self.offset + page_size,
            pages_loaded=self.pages_loaded + 1,
        )

    def same_query(self, other: FilterState) -> bool:
        """True when both states describe the same search + filter (cursor ignored)."""
        return (
            self.search_text == other.search_text and self.active_filter == other.active_filter
        )

    @property
    def is_identity(self) -> bool:
        """Search + filter leave the catalog untouched (same members, same order)."""
        return self.search_text == "" and self.active_filter == FILTER_ALL


class Emptiness(str, Enum):
    """Why a displayed result set is (or is not) empty."""

    NOT_EMPTY = "not-empty"
    CATALOG_EMPTY = "catalog-empty"
    FILTERED_EMPTY = "filtered-empty"
    ERROR = "error"


def classify_emptiness(displayed_count: int, catalog_empty: bool, failed: bool = False) -> Emptiness:
    """Compute the emptiness classification independently of any rendered wording."""
    if failed:
        return Emptiness.ERROR
    if displayed_count > 0:
        return Emptiness.NOT_EMPTY
    if catalog_empty:
        return Emptiness.CATALOG_EMPTY
    return Emptiness.FILTERED_EMPTY


@dataclass(frozen=True, slots=True)
class FlashMessage:
    kind: str  # "error" | "info"
    message: str
    error_id: str | None = None  # log correlation only, never rendered


@dataclass(frozen=True, slots=True)
class ProgramView:
    """Display-ready program card."""

    id: str
    title: str
    description: str
    schedule: str
    age_range: str
    price_label: str
    period: str
    spots_left: int
    spots_badge: str | None
    gradient_class: str
    icon_path: str


@dataclass(frozen=True, slots=True)
class DisplayResult:
    """What the listing renders. Derived fresh on every FilterState change; never persisted."""

    items: list[ProgramView] = field(default_factory=list)
    has_more: bool = False
    # None until a load has been classified (before the first load, or mid-fetch)
    emptiness: Emptiness | None = None
    flash: FlashMessage | None = None
