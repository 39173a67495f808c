"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends

from afterschool_catalog.adapters.in_memory_program_catalog import InMemoryProgramCatalog
from afterschool_catalog.adapters.postgres_program_catalog import PostgresProgramCatalog
from afterschool_catalog.infra.config import (
    CATALOG_BACKEND_MEMORY,
    DiscoverySettings,
    load_settings,
)
from afterschool_catalog.infra.db.session import get_session
from afterschool_catalog.infra.sample_catalog import sample_programs
from afterschool_catalog.ports.program_catalog_gateway import ProgramCatalogGateway
from afterschool_catalog.presentation.program_presenter import ProgramPresenter
from afterschool_catalog.use_cases.browse_programs import BrowsePrograms
from afterschool_catalog.use_cases.paginate_programs import PaginatePrograms
from afterschool_catalog.use_cases.select_program import SelectProgram


@lru_cache
def get_settings() -> DiscoverySettings:
    """Discovery settings, read from the environment once per process."""
    return load_settings()


@lru_cache
def get_sample_catalog() -> InMemoryProgramCatalog:
    """Process-wide in-memory catalog for CATALOG_BACKEND=memory."""
    return InMemoryProgramCatalog(programs=sample_programs())


def get_program_catalog_gateway(
    settings: DiscoverySettings = Depends(get_settings),
) -> Generator[ProgramCatalogGateway, None, None]:
    """
    Provides the catalog gateway for a single request.

    The PostgreSQL gateway gets a fresh per-request session; the underlying
    get_session() context manager always rolls back and closes it, since
    discovery never writes.

    Yields:
        ProgramCatalogGateway: Gateway for the configured backend
    """
    if settings.catalog_backend == CATALOG_BACKEND_MEMORY:
        yield get_sample_catalog()
        return

    with get_session() as session:
        yield PostgresProgramCatalog(session=session)


def get_presenter(settings: DiscoverySettings = Depends(get_settings)) -> ProgramPresenter:
    return ProgramPresenter(currency_symbol=settings.currency_symbol)


def get_browse_programs_use_case(
    gateway: ProgramCatalogGateway = Depends(get_program_catalog_gateway),
    presenter: ProgramPresenter = Depends(get_presenter),
    settings: DiscoverySettings = Depends(get_settings),
) -> BrowsePrograms:
    """
    Factory function that returns a configured BrowsePrograms use case.

    Called per-request, so each request gets a fresh paginator bound to an
    isolated gateway.
    """
    paginator = PaginatePrograms(
        gateway=gateway,
        page_size=settings.page_size,
        latency_budget_ms=settings.latency_budget_ms,
    )
    return BrowsePrograms(paginator=paginator, presenter=presenter)


def get_select_program_use_case(
    gateway: ProgramCatalogGateway = Depends(get_program_catalog_gateway),
    presenter: ProgramPresenter = Depends(get_presenter),
) -> SelectProgram:
    return SelectProgram(gateway=gateway, presenter=presenter)
