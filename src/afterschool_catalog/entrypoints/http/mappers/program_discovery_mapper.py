from __future__ import annotations

from typing import Any

from afterschool_catalog.domain.discovery import (
    Emptiness,
    FilterState,
    FlashMessage,
    ProgramView,
)
from afterschool_catalog.domain.filter_state import (
    FILTER_PARAM,
    SEARCH_PARAM,
    normalize,
    to_query_string,
)
from afterschool_catalog.entrypoints.http.dtos.program_discovery import (
    EmptyStateDTO,
    FlashDTO,
    ListingStateDTO,
    ProgramCardDTO,
    ProgramListingResponseDTO,
    ProgramsQueryDTO,
)
from afterschool_catalog.use_cases.browse_programs import (
    BrowseProgramsRequest,
    BrowseProgramsResponse,
)

EMPTY_STATE_TITLE = "No programs found"
EMPTY_STATE_HINT = "Try adjusting your search or filter criteria."


class ProgramDiscoveryMapper:
    """Maps between REST DTOs and domain models for program discovery."""

    @staticmethod
    def to_raw_params(dto: ProgramsQueryDTO) -> dict[str, Any]:
        """Untyped URL state, in the shape the query normalizer accepts."""
        return {SEARCH_PARAM: dto.q, FILTER_PARAM: dto.filter}

    @staticmethod
    def to_domain_state(dto: ProgramsQueryDTO) -> FilterState:
        return normalize(ProgramDiscoveryMapper.to_raw_params(dto))

    @staticmethod
    def to_domain_request(
        dto: ProgramsQueryDTO, session_id: str | None = None
    ) -> BrowseProgramsRequest:
        """
        Convenience method: builds complete domain request from DTO.

        Args:
            dto: Listing query parameters
            session_id: Anonymous session id for log correlation

        Returns:
            BrowseProgramsRequest: Normalized state plus load-more cursor
        """
        return BrowseProgramsRequest(
            state=ProgramDiscoveryMapper.to_domain_state(dto),
            offset=dto.offset,
            session_id=session_id,
        )

    @staticmethod
    def to_card_response(view: ProgramView) -> ProgramCardDTO:
        return ProgramCardDTO(
            id=view.id,
            title=view.title,
            description=view.description,
            schedule=view.schedule,
            age_range=view.age_range,
            price=view.price_label,
            period=view.period,
            spots_left=view.spots_left,
            spots_badge=view.spots_badge,
            gradient_class=view.gradient_class,
            icon_path=view.icon_path,
        )

    @staticmethod
    def to_flash_response(flash: FlashMessage | None) -> FlashDTO | None:
        if flash is None:
            return None
        return FlashDTO(kind=flash.kind, message=flash.message, error_id=flash.error_id)

    @staticmethod
    def to_empty_state(emptiness: Emptiness | None) -> EmptyStateDTO | None:
        # Same wording for every empty kind; the error case adds a flash on top
        if emptiness is None or emptiness == Emptiness.NOT_EMPTY:
            return None
        return EmptyStateDTO(title=EMPTY_STATE_TITLE, hint=EMPTY_STATE_HINT)

    @staticmethod
    def to_response(response: BrowseProgramsResponse) -> ProgramListingResponseDTO:
        """
        Converts the browse result to the REST listing response.

        Args:
            response: Use case response (state, display result, next cursor)

        Returns:
            ProgramListingResponseDTO: Cards plus the state needed to render
            and continue the listing
        """
        result = response.result
        return ProgramListingResponseDTO(
            programs=[ProgramDiscoveryMapper.to_card_response(item) for item in result.items],
            has_more=result.has_more,
            next_offset=response.next_offset,
            emptiness=result.emptiness.value if result.emptiness is not None else None,
            empty_state=ProgramDiscoveryMapper.to_empty_state(result.emptiness),
            flash=ProgramDiscoveryMapper.to_flash_response(result.flash),
            state=ListingStateDTO(
                q=response.state.search_text,
                filter=response.state.active_filter,
            ),
            query_string=to_query_string(response.state),
        )
