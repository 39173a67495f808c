from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from afterschool_catalog.domain.program import ProgramRecord


@dataclass(frozen=True)
class CatalogPage:
    """One page read from the catalog plus its continuation flag."""

    records: list[ProgramRecord] = field(default_factory=list)
    has_more: bool = False  # True if the catalog holds records beyond this page


class ProgramCatalogGateway(ABC):
    """
    Port for read access to the program catalog.

    The catalog is the sole source of truth for program records; discovery
    never writes to it. Records come back in a stable catalog order.

    Failures (all subclasses of CatalogError):
        - CatalogConnectionError: the store could not be reached
        - CatalogQueryError: the read query failed
        - CatalogUnavailableError: any other unavailability

    Contract (Preconditions):
        - offset >= 0 and limit >= 1, guaranteed by the caller
    """

    @abstractmethod
    def list_page(self, offset: int, limit: int) -> CatalogPage:
        """
        Read up to `limit` records starting at `offset`.

        Returns:
            CatalogPage with the records and whether unfetched records remain
        """
        ...

    @abstractmethod
    def list_all(self) -> list[ProgramRecord]:
        """Read every record, for call sites that filter/sort the full set."""
        ...

    @abstractmethod
    def get_by_id(self, program_id: str) -> ProgramRecord | None:
        """Return the record, or None if it does not exist (or the id is malformed)."""
        ...
