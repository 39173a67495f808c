"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP flash messages, JSON bodies)
by the use cases and protocol adapters.
"""

from typing import Any

from afterschool_catalog.domain import error_ids


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP responses or user-facing flash messages.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Used for domain invariant violations, e.g. a program record with a
    negative price. Malformed discovery parameters are NOT validation errors:
    the query normalizer recovers them silently.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Program selected from the listing was removed before the click

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Program")
            identifier: Resource identifier (e.g., UUID, ID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ProgramNotFoundError(NotFoundError):
    """A program could not be found when following up on a listing selection."""

    error_id: str = error_ids.PROGRAM_NOT_FOUND
    user_message: str = (
        "Program not found. It may have been removed or is no longer available."
    )

    def __init__(self, program_id: str, **context: Any) -> None:
        super().__init__("Program", program_id, **context)


# ==============================================================================
# Catalog Gateway Failures
# ==============================================================================


class CatalogError(DomainError):
    """The program catalog (backing store) could not serve a read.

    Each subclass carries a stable ``error_id`` for logs and a stable,
    non-technical ``user_message`` for flash messages.

    Protocol mappings:
        - Listing flows: degraded empty result + flash message (never raised)
        - REST (detail lookups): 503 Service Unavailable
    """

    error_code: str = "CATALOG_UNAVAILABLE"
    error_id: str = error_ids.CATALOG_UNAVAILABLE
    user_message: str = "Programs are temporarily unavailable. Please try again later."


class CatalogConnectionError(CatalogError):
    """The catalog store could not be reached (network, pool, timeout)."""

    error_code: str = "CATALOG_CONNECTION_ERROR"
    error_id: str = error_ids.CATALOG_CONNECTION_ERROR
    user_message: str = (
        "We couldn't connect to the program catalog. Please try again in a moment."
    )


class CatalogQueryError(CatalogError):
    """The catalog store rejected or failed to execute the read query."""

    error_code: str = "CATALOG_QUERY_ERROR"
    error_id: str = error_ids.CATALOG_QUERY_ERROR
    user_message: str = "We couldn't load programs right now. Please try again."


class CatalogUnavailableError(CatalogError):
    """Any other catalog failure (general unavailability)."""
