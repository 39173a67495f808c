"""PostgreSQL implementation of ProgramCatalogGateway."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import exc, select
from sqlalchemy.orm import Session

from afterschool_catalog.domain.errors import (
    CatalogConnectionError,
    CatalogQueryError,
    CatalogUnavailableError,
)
from afterschool_catalog.domain.program import ProgramRecord
from afterschool_catalog.infra.db.models.program import ProgramRow
from afterschool_catalog.ports.program_catalog_gateway import CatalogPage, ProgramCatalogGateway

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

logger = logging.getLogger(__name__)

# Checked in order: OperationalError is itself a StatementError subclass
_CONNECTION_ERRORS: tuple[type[Exception], ...] = (
    exc.OperationalError,
    exc.InterfaceError,
    exc.DisconnectionError,
    exc.TimeoutError,
)
_QUERY_ERRORS: tuple[type[Exception], ...] = (
    exc.ProgrammingError,
    exc.DataError,
    exc.StatementError,
)


class PostgresProgramCatalog(ProgramCatalogGateway):
    """
    PostgreSQL implementation of ProgramCatalogGateway.

    - Uses SQLAlchemy ORM for database access (read-only)
    - Catalog order is (title ASC, id ASC) for every read
    - list_page fetches limit + 1 rows to compute has_more without COUNT(*)
    - Converts ProgramRow (infrastructure) to ProgramRecord (domain)
    - Translates SQLAlchemy errors to the three CatalogError kinds
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize gateway with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def list_page(self, offset: int, limit: int) -> CatalogPage:
        """
        Read one page in catalog order.

        Args:
            offset: Rows to skip - must be >= 0
            limit: Page size - must be >= 1

        Returns:
            CatalogPage with up to `limit` records and the continuation flag
        """
        logger.info(
            "Starting list_page query",
            extra={"offset": offset, "limit": limit},
        )

        query = self._ordered_query().offset(offset).limit(limit + 1)
        with self._translate_errors("list_page"):
            rows = self._session.execute(query).scalars().all()

        has_more = len(rows) > limit
        records = [self._to_domain(row) for row in rows[:limit]]

        logger.info(
            "Retrieved program page",
            extra={"returned_count": len(records), "has_more": has_more},
        )
        return CatalogPage(records=records, has_more=has_more)

    def list_all(self) -> list[ProgramRecord]:
        logger.info("Starting list_all query")

        with self._translate_errors("list_all"):
            rows = self._session.execute(self._ordered_query()).scalars().all()

        records = [self._to_domain(row) for row in rows]
        logger.info("Retrieved all programs", extra={"returned_count": len(records)})
        return records

    def get_by_id(self, program_id: str) -> ProgramRecord | None:
        """
        Get program by ID.

        Args:
            program_id: Program ID (expected to be a valid UUID string)

        Returns:
            ProgramRecord if found, None otherwise (including malformed ids)
        """
        try:
            key = UUID(program_id)
        except ValueError:  # Invalid UUID format
            logger.info("Invalid program id format", extra={"program_id": program_id})
            return None

        query = select(ProgramRow).where(ProgramRow.id == key)
        with self._translate_errors("get_by_id"):
            row = self._session.execute(query).scalar_one_or_none()

        return self._to_domain(row) if row else None

    def _ordered_query(self) -> Select[tuple[ProgramRow]]:
        return select(ProgramRow).order_by(ProgramRow.title.asc(), ProgramRow.id.asc())

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Re-raise SQLAlchemy failures as domain CatalogErrors."""
        try:
            yield
        except _CONNECTION_ERRORS as error:
            raise CatalogConnectionError(
                "Catalog connection failed", operation=operation, error_type=type(error).__name__
            ) from error
        except _QUERY_ERRORS as error:
            raise CatalogQueryError(
                "Catalog query failed", operation=operation, error_type=type(error).__name__
            ) from error
        except exc.SQLAlchemyError as error:
            raise CatalogUnavailableError(
                "Catalog unavailable", operation=operation, error_type=type(error).__name__
            ) from error

    def _to_domain(self, row: ProgramRow) -> ProgramRecord:
        """
        Convert database model (ProgramRow) to domain entity (ProgramRecord).

        Args:
            row: SQLAlchemy ProgramRow model

        Returns:
            ProgramRecord domain entity
        """
        return ProgramRecord(
            id=str(row.id),  # Convert UUID to string
            title=row.title,
            description=row.description,
            schedule=row.schedule,
            age_range=row.age_range,
            price=row.price,  # Already Decimal from NUMERIC column
            pricing_period=row.pricing_period,
            spots_available=row.spots_available,
            gradient_class=row.gradient_class,
            icon_path=row.icon_path,
        )
