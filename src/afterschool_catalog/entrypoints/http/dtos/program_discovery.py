from pydantic import BaseModel, ConfigDict, Field


class ProgramCardDTO(BaseModel):
    id: str
    title: str
    description: str
    schedule: str
    age_range: str
    price: str  # display label, e.g. "€150.00" or "Free"
    period: str
    spots_left: int
    spots_badge: str | None = None
    gradient_class: str
    icon_path: str


class ProgramsQueryDTO(BaseModel):
    """
    Query parameters for the program listing.

    q and filter are passed through untouched: the query normalizer owns
    their recovery, so no constraint here may reject them.
    """

    q: str | None = Field(
        default=None,
        description="Search text, matched as a prefix of any word of the title",
        examples=["soc"],
    )
    filter: str | None = Field(
        default=None,
        description='One of "all", "available", "by-age", "by-price" (anything else means "all")',
        examples=["available"],
    )
    offset: int = Field(
        default=0,
        description='Load-more cursor: "next_offset" of the previous page',
        examples=[0],
        ge=0,
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"q": "art", "filter": "by-price", "offset": 0}}
    )


class FlashDTO(BaseModel):
    kind: str
    message: str
    error_id: str | None = None


class EmptyStateDTO(BaseModel):
    title: str
    hint: str


class ListingStateDTO(BaseModel):
    q: str
    filter: str


class ProgramListingResponseDTO(BaseModel):
    programs: list[ProgramCardDTO]
    has_more: bool
    next_offset: int | None = None
    emptiness: str | None = None
    empty_state: EmptyStateDTO | None = None
    flash: FlashDTO | None = None
    state: ListingStateDTO
    query_string: str
