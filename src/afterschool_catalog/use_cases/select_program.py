"""Follow-up lookup when a program card is selected from the listing."""

from __future__ import annotations

import logging

from afterschool_catalog.domain.discovery import FilterState, ProgramView
from afterschool_catalog.domain.errors import ProgramNotFoundError
from afterschool_catalog.domain.filter_state import listing_path
from afterschool_catalog.ports.program_catalog_gateway import ProgramCatalogGateway
from afterschool_catalog.presentation.program_presenter import ProgramPresenter

logger = logging.getLogger(__name__)

LISTING_BASE_PATH = "/v1/programs"


class SelectProgram:
    """
    Use case for retrieving a single program selected from the listing.

    Responsibilities:
    - Delegate to the gateway for data access
    - Raise ProgramNotFoundError (with the listing path to return to) when
      the program was removed between listing and selection
    """

    def __init__(
        self, gateway: ProgramCatalogGateway, presenter: ProgramPresenter
    ) -> None:
        self._gateway = gateway
        self._presenter = presenter

    def execute(self, program_id: str, state: FilterState | None = None) -> ProgramView:
        """
        Args:
            program_id: Identifier of the selected program
            state: Discovery state the selection was made from, used to send
                the user back to the same listing on failure

        Raises:
            ProgramNotFoundError: If no program has the given id
            CatalogError: If the catalog cannot be read
        """
        record = self._gateway.get_by_id(program_id)

        if record is None:
            error = ProgramNotFoundError(
                program_id,
                redirect_to=listing_path(state or FilterState(), LISTING_BASE_PATH),
            )
            logger.info(
                "Selected program not found",
                extra={"program_id": program_id, "error_id": error.error_id},
            )
            raise error

        return self._presenter.to_view_model(record)
