from __future__ import annotations

from afterschool_catalog.domain.errors import CatalogError
from afterschool_catalog.domain.program import ProgramRecord
from afterschool_catalog.ports.program_catalog_gateway import CatalogPage, ProgramCatalogGateway


class InMemoryProgramCatalog(ProgramCatalogGateway):
    """
    Canonical contract implementation for tests and local development.

    - Stores programs in insertion order (that is the catalog order)
    - Pages by offset/limit over that order
    - has_more is True when records exist past the returned page
    - fail_with: raise this CatalogError from every read (simulates outages)
    """

    def __init__(
        self,
        programs: list[ProgramRecord] | None = None,
        fail_with: CatalogError | None = None,
    ) -> None:
        self._programs = list(programs or [])
        self.fail_with = fail_with

    def list_page(self, offset: int, limit: int) -> CatalogPage:
        # Trust that callers pass a valid cursor (contract programming)
        self._raise_if_failing()

        start = offset
        end = offset + limit
        return CatalogPage(
            records=self._programs[start:end],
            has_more=end < len(self._programs),
        )

    def list_all(self) -> list[ProgramRecord]:
        self._raise_if_failing()
        return list(self._programs)

    def get_by_id(self, program_id: str) -> ProgramRecord | None:
        self._raise_if_failing()
        return next((program for program in self._programs if program.id == program_id), None)

    def _raise_if_failing(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with
