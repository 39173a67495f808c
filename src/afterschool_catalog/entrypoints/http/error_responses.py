"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "offset",
                "message": "Input should be greater than or equal to 0",
                "code": "greater_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)
    - Catalog errors with a log correlation id (error_id)
    - Not-found selections with the listing to return to (redirect_to)

    Examples:
        Program removed before it was selected:
            {
                "detail": "Program not found. It may have been removed or is no longer available.",
                "code": "NOT_FOUND",
                "error_id": "program.catalog.detail.not_found",
                "redirect_to": "/v1/programs?q=soccer"
            }

        Catalog unreachable:
            {
                "detail": "We couldn't connect to the program catalog. Please try again in a moment.",
                "code": "CATALOG_CONNECTION_ERROR",
                "error_id": "program.catalog.list.connection_error"
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    error_id: str | None = None
    redirect_to: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Program not found. It may have been removed or is no longer available.",
                    "code": "NOT_FOUND",
                    "error_id": "program.catalog.detail.not_found",
                    "redirect_to": "/v1/programs",
                },
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "offset",
                            "message": "Input should be greater than or equal to 0",
                            "code": "greater_than_equal",
                        },
                    ],
                },
            ]
        }
    )
