from fastapi import APIRouter, Depends, Header

from afterschool_catalog.entrypoints.http.dependencies import (
    get_browse_programs_use_case,
    get_select_program_use_case,
)
from afterschool_catalog.entrypoints.http.dtos.program_discovery import (
    ProgramCardDTO,
    ProgramListingResponseDTO,
    ProgramsQueryDTO,
)
from afterschool_catalog.entrypoints.http.error_responses import ErrorResponse
from afterschool_catalog.entrypoints.http.mappers.program_discovery_mapper import (
    ProgramDiscoveryMapper,
)
from afterschool_catalog.use_cases.browse_programs import BrowsePrograms
from afterschool_catalog.use_cases.select_program import SelectProgram

router = APIRouter(tags=["Programs"])


@router.get(
    "/programs",
    response_model=ProgramListingResponseDTO,
    summary="Browse program catalog",
    description="""
    Browse afterschool programs with free-text search, one categorical
    filter and incremental pagination.

    ## Search
    - Case-insensitive prefix match against any word of the title
    - "so" matches "After School Soccer"; "art" does not match "Particular"

    ## Filters
    - all: catalog order
    - available: only programs with spots left
    - by-age: youngest minimum age first (unparseable ages last)
    - by-price: cheapest first

    ## Pagination
    - First page: offset=0
    - Load more: pass `next_offset` from the previous page and append the result

    ## Example
    ```
    GET /v1/programs?q=soc&filter=available
    ```
    """,
    responses={
        200: {
            "description": "Listing page (catalog failures degrade to an error result)",
            "content": {
                "application/json": {
                    "example": {
                        "programs": [
                            {
                                "id": "550e8400-e29b-41d4-a716-446655440000",
                                "title": "After School Soccer",
                                "description": "Dribbling, passing, and teamwork.",
                                "schedule": "Mon, Wed 3:00-4:30 PM",
                                "age_range": "6-10 years",
                                "price": "€150.00",
                                "period": "per session",
                                "spots_left": 3,
                                "spots_badge": "3 spots left!",
                                "gradient_class": "bg-gradient-to-br from-hero-blue-400 to-hero-blue-600",
                                "icon_path": "M12 14l9-5-9-5-9 5 9 5z",
                            }
                        ],
                        "has_more": False,
                        "next_offset": None,
                        "emptiness": "not-empty",
                        "empty_state": None,
                        "flash": None,
                        "state": {"q": "soc", "filter": "available"},
                        "query_string": "q=soc&filter=available",
                    }
                }
            },
        },
        422: {"description": "Invalid pagination cursor", "model": ErrorResponse},
    },
)
def get_programs(
    query: ProgramsQueryDTO = Depends(),
    x_session_id: str | None = Header(default=None),
    use_case: BrowsePrograms = Depends(get_browse_programs_use_case),
) -> ProgramListingResponseDTO:
    """Browse programs endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request (normalizes q/filter)
    request = ProgramDiscoveryMapper.to_domain_request(query, session_id=x_session_id)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return ProgramDiscoveryMapper.to_response(result)


@router.get(
    "/programs/{program_id}",
    response_model=ProgramCardDTO,
    summary="Get program by ID",
    description="""
    Retrieve the card of a program selected from the listing.

    Pass the listing's `q` and `filter` along so that a program removed in the
    meantime answers with `redirect_to` pointing back at the same listing.
    """,
    responses={
        404: {"description": "Program no longer available", "model": ErrorResponse},
        503: {"description": "Catalog unavailable", "model": ErrorResponse},
    },
)
def get_program(
    program_id: str,
    query: ProgramsQueryDTO = Depends(),
    use_case: SelectProgram = Depends(get_select_program_use_case),
) -> ProgramCardDTO:
    view = use_case.execute(program_id, ProgramDiscoveryMapper.to_domain_state(query))
    return ProgramDiscoveryMapper.to_card_response(view)
