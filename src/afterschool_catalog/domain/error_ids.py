"""Centralized error IDs for logging and support correlation.

Error IDs use dotted notation: ``context.domain.action.type``.
They are written to structured logs and never shown to end users.
"""

# Program listing - catalog gateway failures
CATALOG_CONNECTION_ERROR = "program.catalog.list.connection_error"
CATALOG_QUERY_ERROR = "program.catalog.list.query_error"
CATALOG_UNAVAILABLE = "program.catalog.list.unavailable"

# Program detail
PROGRAM_NOT_FOUND = "program.catalog.detail.not_found"
