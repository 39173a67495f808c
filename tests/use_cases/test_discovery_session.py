"""Test suite for DiscoverySession (stateful listing flow)."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from afterschool_catalog.adapters.in_memory_program_catalog import InMemoryProgramCatalog
from afterschool_catalog.domain.discovery import DisplayResult, Emptiness, FilterState
from afterschool_catalog.domain.errors import CatalogConnectionError, CatalogUnavailableError
from afterschool_catalog.domain.program import ProgramRecord
from afterschool_catalog.presentation.program_presenter import ProgramPresenter
from afterschool_catalog.use_cases.discovery_session import DiscoverySession
from afterschool_catalog.use_cases.paginate_programs import PaginatePrograms

TITLES = [
    "Art Adventures",
    "Basketball Skills Camp",
    "Chess Club",
    "Chess Masters",
    "Drama Workshop",
    "Robotics Lab",
    "Swim School",
]


class HookedCatalog(InMemoryProgramCatalog):
    """In-memory catalog that runs a callback once, in the middle of the next read."""

    def __init__(self, programs: list[ProgramRecord]) -> None:
        super().__init__(programs)
        self.hook: Callable[[], None] | None = None

    def list_page(self, offset, limit):
        self._fire()
        return super().list_page(offset, limit)

    def list_all(self):
        self._fire()
        return super().list_all()

    def _fire(self) -> None:
        hook, self.hook = self.hook, None
        if hook is not None:
            hook()


@pytest.fixture()
def catalog(make_program) -> HookedCatalog:
    return HookedCatalog([make_program(title) for title in TITLES])


def _session(catalog: InMemoryProgramCatalog, page_size: int = 2) -> DiscoverySession:
    paginator = PaginatePrograms(catalog, page_size=page_size)
    return DiscoverySession(paginator, ProgramPresenter(), session_id="anon-42")


def _titles(result: DisplayResult) -> list[str]:
    return [item.title for item in result.items]


# ==============================================================================
# Open / Change
# ==============================================================================


def test_open_loads_first_page(catalog: HookedCatalog) -> None:
    session = _session(catalog)

    result = session.open({})

    assert _titles(result) == ["Art Adventures", "Basketball Skills Camp"]
    assert result.has_more is True
    assert result.emptiness == Emptiness.NOT_EMPTY
    assert session.state == FilterState(offset=0, pages_loaded=1)


def test_open_normalizes_raw_params(catalog: HookedCatalog) -> None:
    session = _session(catalog)

    session.open({"q": "  chess ", "filter": "bogus"})

    assert session.state.search_text == "chess"
    assert session.state.active_filter == "all"
    assert session.query_string() == "q=chess"
    assert session.listing_path() == "/programs?q=chess"


def test_pagination_is_append_only(catalog: HookedCatalog) -> None:
    session = _session(catalog)
    initial = session.open()

    after = session.load_more()

    assert after is not None
    assert after.items[: len(initial.items)] == initial.items
    assert _titles(after)[2:] == ["Chess Club", "Chess Masters"]
    assert session.state.offset == 2
    assert session.state.pages_loaded == 2


def test_change_after_load_more_equals_fresh_load(catalog: HookedCatalog) -> None:
    """Changing search or filter drops every accumulated page."""
    session = _session(catalog)
    session.open()
    session.load_more()
    session.load_more()

    changed = session.change_filter("by-price")
    fresh = _session(catalog).open({"filter": "by-price"})

    assert changed == fresh
    assert session.state == FilterState(active_filter="by-price", pages_loaded=1)


def test_change_search_keeps_filter(catalog: HookedCatalog) -> None:
    session = _session(catalog)
    session.open({"filter": "available"})

    result = session.change_search("ch")

    assert session.state.active_filter == "available"
    assert _titles(result) == ["Chess Club", "Chess Masters"]


def test_apply_params_replaces_whole_state(catalog: HookedCatalog) -> None:
    session = _session(catalog)
    session.open({"q": "chess", "filter": "by-age"})
    session.load_more()

    result = session.apply_params({"filter": "by-price"})

    assert session.state == FilterState(active_filter="by-price", pages_loaded=1)
    assert len(result.items) == 2


def test_invalid_filter_change_falls_back_to_all(catalog: HookedCatalog) -> None:
    session = _session(catalog)
    session.open({"filter": "by-age"})

    session.change_filter("<script>")

    assert session.state.active_filter == "all"


def test_load_more_at_end_is_noop(catalog: HookedCatalog) -> None:
    session = _session(catalog, page_size=10)
    before = session.open()

    after = session.load_more()

    assert after == before
    assert session.state.pages_loaded == 1


# ==============================================================================
# Emptiness
# ==============================================================================


def test_empty_catalog_is_catalog_empty() -> None:
    result = _session(InMemoryProgramCatalog()).open()

    assert result.items == []
    assert result.emptiness == Emptiness.CATALOG_EMPTY


def test_all_sold_out_with_available_is_filtered_empty(make_program) -> None:
    catalog = InMemoryProgramCatalog([make_program("Art Class", spots_available=0)])

    result = _session(catalog).open({"filter": "available"})

    assert result.emptiness == Emptiness.FILTERED_EMPTY


def test_unopened_session_makes_no_emptiness_claim(catalog: HookedCatalog) -> None:
    assert _session(catalog).result().emptiness is None


@pytest.mark.parametrize(
    ("first_params", "first_emptiness"),
    [({"q": "zzz"}, Emptiness.FILTERED_EMPTY), ({}, Emptiness.NOT_EMPTY)],
)
def test_mid_fetch_snapshot_drops_previous_classification(
    catalog: HookedCatalog, first_params: dict, first_emptiness: Emptiness
) -> None:
    session = _session(catalog)
    assert session.open(first_params).emptiness == first_emptiness
    seen: list[DisplayResult] = []
    catalog.hook = lambda: seen.append(session.result())

    session.change_search("chess")

    assert seen[0].items == []
    assert seen[0].emptiness is None
    assert session.result().emptiness == Emptiness.NOT_EMPTY


def test_mid_fetch_snapshot_after_error_drops_error(catalog: HookedCatalog) -> None:
    session = _session(catalog)
    catalog.fail_with = CatalogConnectionError("refused")
    assert session.open().emptiness == Emptiness.ERROR
    catalog.fail_with = None
    seen: list[DisplayResult] = []
    catalog.hook = lambda: seen.append(session.result())

    session.change_filter("available")

    assert seen[0].emptiness is None
    assert seen[0].flash is None


# ==============================================================================
# Concurrency
# ==============================================================================


def test_second_load_more_while_in_flight_is_ignored(catalog: HookedCatalog) -> None:
    session = _session(catalog)
    session.open()
    nested: list[DisplayResult | None] = []
    catalog.hook = lambda: nested.append(session.load_more())

    result = session.load_more()

    assert nested == [None]
    assert result is not None
    assert len(result.items) == 4
    assert session.state.pages_loaded == 2
    assert session.loading_more is False


def test_stale_load_more_page_is_discarded(catalog: HookedCatalog) -> None:
    """A page for a superseded state never reaches the new display."""
    session = _session(catalog)
    session.open()
    catalog.hook = lambda: session.change_search("swim")

    result = session.load_more()

    assert _titles(result) == ["Swim School"]
    assert session.state == FilterState(search_text="swim", pages_loaded=1)
    assert session.loading_more is False


# ==============================================================================
# Failures
# ==============================================================================


def test_initial_failure_gives_error_result(catalog: HookedCatalog) -> None:
    catalog.fail_with = CatalogConnectionError("refused")
    session = _session(catalog)

    result = session.open({"q": "chess"})

    assert result.items == []
    assert result.emptiness == Emptiness.ERROR
    assert result.flash is not None
    assert result.flash.kind == "error"
    assert result.flash.error_id == "program.catalog.list.connection_error"
    assert session.state.search_text == "chess"


def test_load_more_failure_keeps_displayed_items(catalog: HookedCatalog) -> None:
    session = _session(catalog)
    initial = session.open()
    catalog.fail_with = CatalogUnavailableError("maintenance")

    failed = session.load_more()

    assert failed is not None
    assert failed.items == initial.items
    assert failed.has_more is True
    assert failed.flash is not None
    assert failed.flash.message == CatalogUnavailableError.user_message
    assert session.state.pages_loaded == 1

    catalog.fail_with = None
    retried = session.load_more()

    assert len(retried.items) == 4
    assert retried.flash is None
