"""FastAPI exception handlers for domain errors.

Translates domain errors to appropriate HTTP responses with structured error format.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from afterschool_catalog.domain.errors import CatalogError, DomainError

logger = logging.getLogger(__name__)

# Map error codes to HTTP status codes
STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def status_code_for(exc: DomainError) -> int:
    if isinstance(exc, CatalogError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors with automatic HTTP status code mapping.

    Maps domain errors to appropriate HTTP status codes:
    - VALIDATION_ERROR → 422 Unprocessable Entity
    - NOT_FOUND → 404 Not Found
    - CatalogError (any kind) → 503 Service Unavailable
    - Other → 400 Bad Request

    Errors that carry a user-facing message (catalog failures, programs
    removed before selection) answer with that message instead of the
    technical one, plus the error_id for log correlation.

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        JSON response with structured error format
    """
    error_dict = exc.to_dict()
    status_code = status_code_for(exc)

    # Log errors (except expected validation errors)
    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_id": getattr(exc, "error_id", None),
                "error_detail": exc.message,
                "error_context": exc.context,
                "path": request.url.path,
                "method": request.method,
            },
        )
    elif status_code >= 400:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_detail": exc.message,
                "path": request.url.path,
                "method": request.method,
            },
        )

    user_message = getattr(exc, "user_message", None)

    # Build structured response
    response_content: dict[str, Any] = {
        "detail": user_message or error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }

    # Add field-level errors if present (for ValidationError)
    if "errors" in error_dict:
        response_content["errors"] = error_dict["errors"]

    error_id = getattr(exc, "error_id", None)
    if error_id:
        response_content["error_id"] = error_id

    # Where the client should go back to (ProgramNotFoundError)
    if exc.context.get("redirect_to"):
        response_content["redirect_to"] = exc.context["redirect_to"]

    return JSONResponse(status_code=status_code, content=response_content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    Discovery parameters (q, filter) never fail validation: the query
    normalizer recovers them. What remains are protocol-level mistakes.

    Examples:
        - offset=-5 (violates ge=0)
        - offset=abc (not an integer)

    Args:
        request: FastAPI request object
        exc: Pydantic validation error

    Returns:
        JSON response with 422 status and structured errors
    """
    errors = []

    for error in exc.errors():
        # Extract field path from error location
        # Filter out 'body' and 'query' prefixes
        field_path = ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query"))

        errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "code": error["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={
            "errors": errors,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors.

    These should be rare and indicate bugs or infrastructure issues.
    Always logged with full traceback for investigation.

    Args:
        request: FastAPI request object
        exc: Unexpected exception

    Returns:
        JSON response with 500 status and generic error message
    """
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_detail": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    This should be called once during app initialization.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
