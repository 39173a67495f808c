from __future__ import annotations

from dataclasses import dataclass, field

from afterschool_catalog.domain import program_filters, program_search
from afterschool_catalog.domain.discovery import FilterState
from afterschool_catalog.domain.program import ProgramRecord
from afterschool_catalog.infra.config import (
    DEFAULT_LATENCY_BUDGET_MS,
    DEFAULT_PAGE_SIZE,
    clamp_page_size,
)
from afterschool_catalog.infra.instrumentation import filter_timer
from afterschool_catalog.ports.program_catalog_gateway import ProgramCatalogGateway


@dataclass(frozen=True, slots=True)
class PageResult:
    records: list[ProgramRecord] = field(default_factory=list)
    has_more: bool = False
    next_offset: int = 0
    displayed_total: int = 0  # matched records from the top of the listing through this page
    catalog_empty: bool = False  # True only when the catalog itself holds no records


class PaginatePrograms:
    """
    Incremental retrieval of the program listing.

    Contract:
    - Search and the categorical filter/sort always run over the FULL catalog
      (gateway.list_all); pagination only chunks the already sorted result.
    - Identity state ("all" + empty search) cannot change membership or order,
      so it pages straight through gateway.list_page. Both paths yield the
      same chunks.
    - load_more never revisits earlier chunks: callers append its records.
    - CatalogError from the gateway propagates to the caller.
    """

    def __init__(
        self,
        gateway: ProgramCatalogGateway,
        page_size: int = DEFAULT_PAGE_SIZE,
        latency_budget_ms: int = DEFAULT_LATENCY_BUDGET_MS,
    ) -> None:
        self._gateway = gateway
        self._page_size = clamp_page_size(page_size)
        self._latency_budget_ms = latency_budget_ms

    @property
    def page_size(self) -> int:
        return self._page_size

    def load_initial(self, state: FilterState, session_id: str | None = None) -> PageResult:
        """First page for the given state (cursor 0)."""
        return self._load(state, 0, "load_initial", session_id)

    def load_more(
        self, state: FilterState, cursor: int, session_id: str | None = None
    ) -> PageResult:
        """
        Next page starting at `cursor`.

        A cursor at or past the end is a no-op: empty page, has_more False.
        """
        return self._load(state, max(cursor, 0), "load_more", session_id)

    def _load(
        self, state: FilterState, offset: int, operation: str, session_id: str | None
    ) -> PageResult:
        if state.is_identity:
            return self._load_catalog_page(state, offset, operation, session_id)
        return self._load_filtered_chunk(state, offset, operation, session_id)

    def _load_catalog_page(
        self, state: FilterState, offset: int, operation: str, session_id: str | None
    ) -> PageResult:
        page = self._gateway.list_page(offset, self._page_size)
        records = self._evaluate(page.records, state, operation, session_id)

        catalog_empty = not page.records
        if catalog_empty and offset > 0:
            # Past the end, or nothing there at all
            catalog_empty = not self._gateway.list_page(0, 1).records

        return PageResult(
            records=records,
            has_more=page.has_more,
            next_offset=offset + self._page_size,
            # A non-empty catalog at `offset` means earlier pages were displayed
            displayed_total=0 if catalog_empty else offset + len(records),
            catalog_empty=catalog_empty,
        )

    def _load_filtered_chunk(
        self, state: FilterState, offset: int, operation: str, session_id: str | None
    ) -> PageResult:
        catalog = self._gateway.list_all()
        matched = self._evaluate(catalog, state, operation, session_id)

        end = offset + self._page_size
        return PageResult(
            records=matched[offset:end],
            has_more=end < len(matched),
            next_offset=end,
            displayed_total=min(end, len(matched)),
            catalog_empty=not catalog,
        )

    def _evaluate(
        self,
        records: list[ProgramRecord],
        state: FilterState,
        operation: str,
        session_id: str | None,
    ) -> list[ProgramRecord]:
        with filter_timer(
            operation,
            state.search_text,
            session_id=session_id,
            budget_ms=self._latency_budget_ms,
        ) as measurement:
            matched = program_search.filter_programs(records, state.search_text)
            result = program_filters.apply(matched, state.active_filter)
            measurement.result_count = len(result)

        return result
