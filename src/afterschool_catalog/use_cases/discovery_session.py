from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from afterschool_catalog.domain.discovery import (
    DisplayResult,
    Emptiness,
    FilterState,
    FlashMessage,
    ProgramView,
    classify_emptiness,
)
from afterschool_catalog.domain.errors import CatalogError
from afterschool_catalog.domain.filter_state import (
    FILTER_PARAM,
    SEARCH_PARAM,
    listing_path,
    normalize,
    to_query_params,
    to_query_string,
)
from afterschool_catalog.presentation.program_presenter import ProgramPresenter
from afterschool_catalog.use_cases.catalog_failures import report_catalog_failure
from afterschool_catalog.use_cases.paginate_programs import PaginatePrograms

logger = logging.getLogger(__name__)


class DiscoverySession:
    """
    One browsing session of the program listing.

    Holds the session's FilterState and the displayed cards, and processes
    the three UI events:

    - open / change_search / change_filter: replace the state wholesale
      (through the normalizer), discard accumulated pages, load page one.
    - load_more: append the next page. A second activation while one is in
      flight is ignored (returns None). A page that arrives after the state
      changed belongs to a stale FilterState and is discarded.

    Catalog failures never escape: they end in a valid, re-renderable state
    with a flash message.

    Gateway I/O runs outside the lock; only state transitions hold it.
    """

    def __init__(
        self,
        paginator: PaginatePrograms,
        presenter: ProgramPresenter,
        session_id: str | None = None,
    ) -> None:
        self._paginator = paginator
        self._presenter = presenter
        self._session_id = session_id

        self._lock = threading.Lock()
        self._state = FilterState()
        self._items: list[ProgramView] = []
        self._has_more = False
        self._emptiness: Emptiness | None = None
        self._flash: FlashMessage | None = None
        self._loading_more = False
        self._generation = 0

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def loading_more(self) -> bool:
        return self._loading_more

    def result(self) -> DisplayResult:
        with self._lock:
            return self._snapshot()

    def query_string(self) -> str:
        return to_query_string(self._state)

    def listing_path(self, base: str = "/programs") -> str:
        return listing_path(self._state, base)

    # ==========================================================================
    # State replacement
    # ==========================================================================

    def open(self, raw_params: Mapping[str, Any] | None = None) -> DisplayResult:
        """First view of the listing, from URL parameters (or defaults)."""
        return self._replace_state(normalize(raw_params))

    def apply_params(self, raw_params: Mapping[str, Any] | None) -> DisplayResult:
        """URL changed underneath the session (back/forward, pasted link)."""
        return self._replace_state(normalize(raw_params))

    def change_search(self, search_text: Any) -> DisplayResult:
        return self._replace_state(normalize(self._params_with(SEARCH_PARAM, search_text)))

    def change_filter(self, filter_id: Any) -> DisplayResult:
        return self._replace_state(normalize(self._params_with(FILTER_PARAM, filter_id)))

    def _params_with(self, key: str, value: Any) -> dict[str, Any]:
        params: dict[str, Any] = dict(to_query_params(self._state))
        params[key] = value
        return params

    def _replace_state(self, new_state: FilterState) -> DisplayResult:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._state = new_state
            self._items = []
            self._has_more = False
            self._emptiness = None
            self._flash = None
            # Any in-flight load_more now belongs to a stale state
            self._loading_more = False

        try:
            page = self._paginator.load_initial(new_state, self._session_id)
        except CatalogError as error:
            flash = report_catalog_failure(error, "load_initial", new_state, self._session_id)
            with self._lock:
                if generation == self._generation:
                    self._emptiness = Emptiness.ERROR
                    self._flash = flash
                return self._snapshot()

        views = self._presenter.to_view_models(page.records)

        with self._lock:
            if generation != self._generation:
                # Superseded by a newer change while fetching
                return self._snapshot()

            self._state = replace(new_state, offset=0, pages_loaded=1)
            self._items = views
            self._has_more = page.has_more
            self._emptiness = classify_emptiness(len(views), page.catalog_empty)
            return self._snapshot()

    # ==========================================================================
    # Load more
    # ==========================================================================

    def load_more(self) -> DisplayResult | None:
        """
        Append the next page.

        Returns:
            The updated result, the unchanged result when nothing is left to
            load, or None when ignored because a load is already in flight.
        """
        with self._lock:
            if self._loading_more:
                return None
            if not self._has_more:
                return self._snapshot()

            self._loading_more = True
            generation = self._generation
            next_state = self._state.with_next_page(self._paginator.page_size)

        try:
            page = self._paginator.load_more(next_state, next_state.offset, self._session_id)
        except CatalogError as error:
            flash = report_catalog_failure(error, "load_more", next_state, self._session_id)
            with self._lock:
                if generation == self._generation:
                    # Keep what is already displayed; the user may retry
                    self._loading_more = False
                    self._flash = flash
                return self._snapshot()

        views = self._presenter.to_view_models(page.records)

        with self._lock:
            if generation != self._generation:
                logger.info(
                    "Discarded stale load-more page",
                    extra={
                        "session_id": self._session_id,
                        "discarded_count": len(views),
                        "stale_search_text": next_state.search_text,
                        "stale_filter": next_state.active_filter,
                    },
                )
                return self._snapshot()

            self._state = next_state
            self._items = [*self._items, *views]
            self._has_more = page.has_more
            self._loading_more = False
            self._flash = None
            self._emptiness = classify_emptiness(len(self._items), catalog_empty=False)
            return self._snapshot()

    def _snapshot(self) -> DisplayResult:
        return DisplayResult(
            items=list(self._items),
            has_more=self._has_more,
            emptiness=self._emptiness,
            flash=self._flash,
        )
