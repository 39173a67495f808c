from __future__ import annotations

import logging

from afterschool_catalog.domain.discovery import FilterState, FlashMessage
from afterschool_catalog.domain.errors import CatalogError

logger = logging.getLogger(__name__)


def report_catalog_failure(
    error: CatalogError,
    operation: str,
    state: FilterState,
    session_id: str | None = None,
) -> FlashMessage:
    """
    Log a catalog failure with enough context to diagnose it later and
    return the stable, non-technical flash message for the user.
    """
    logger.error(
        "Catalog read failed",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_detail": error.message,
            "error_context": error.context,
            "operation": operation,
            "search_text": state.search_text,
            "filter": state.active_filter,
            "session_id": session_id,
        },
    )
    return FlashMessage(kind="error", message=error.user_message, error_id=error.error_id)
