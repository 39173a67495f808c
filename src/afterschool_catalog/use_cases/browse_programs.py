"""Stateless listing use case behind the HTTP API."""

from __future__ import annotations

from dataclasses import dataclass

from afterschool_catalog.domain.discovery import (
    DisplayResult,
    Emptiness,
    FilterState,
    classify_emptiness,
)
from afterschool_catalog.domain.errors import CatalogError
from afterschool_catalog.presentation.program_presenter import ProgramPresenter
from afterschool_catalog.use_cases.catalog_failures import report_catalog_failure
from afterschool_catalog.use_cases.paginate_programs import PaginatePrograms


@dataclass(frozen=True, slots=True)
class BrowseProgramsRequest:
    state: FilterState
    offset: int = 0
    session_id: str | None = None


@dataclass(frozen=True, slots=True)
class BrowseProgramsResponse:
    state: FilterState
    result: DisplayResult
    next_offset: int | None = None  # None when nothing is left to load


class BrowsePrograms:
    """
    One page of the program listing for an already normalized FilterState.

    offset 0 is the initial load; any other offset is a "load more" request
    for the chunk starting there. The client appends the chunk.

    Catalog failures are degraded to an error result with a flash message;
    they are never raised to the caller.
    """

    def __init__(self, paginator: PaginatePrograms, presenter: ProgramPresenter) -> None:
        self._paginator = paginator
        self._presenter = presenter

    def execute(self, request: BrowseProgramsRequest) -> BrowseProgramsResponse:
        state = request.state
        operation = "load_initial" if request.offset == 0 else "load_more"

        try:
            if request.offset == 0:
                page = self._paginator.load_initial(state, request.session_id)
            else:
                page = self._paginator.load_more(state, request.offset, request.session_id)
        except CatalogError as error:
            flash = report_catalog_failure(error, operation, state, request.session_id)
            return BrowseProgramsResponse(
                state=state,
                result=DisplayResult(emptiness=Emptiness.ERROR, flash=flash),
            )

        result = DisplayResult(
            items=self._presenter.to_view_models(page.records),
            has_more=page.has_more,
            emptiness=classify_emptiness(page.displayed_total, page.catalog_empty),
        )
        return BrowseProgramsResponse(
            state=state,
            result=result,
            next_offset=page.next_offset if page.has_more else None,
        )
