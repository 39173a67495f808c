"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the dependency wiring logic:
- get_program_catalog_gateway() yields a per-request gateway for the backend
- Use case factories wire paginator, presenter and settings together
- Each request gets fresh instances

Tests use mocks to verify wiring without requiring a real database.
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest

from afterschool_catalog.adapters.in_memory_program_catalog import InMemoryProgramCatalog
from afterschool_catalog.adapters.postgres_program_catalog import PostgresProgramCatalog
from afterschool_catalog.entrypoints.http.dependencies import (
    get_browse_programs_use_case,
    get_presenter,
    get_program_catalog_gateway,
    get_sample_catalog,
    get_select_program_use_case,
)
from afterschool_catalog.infra.config import DiscoverySettings
from afterschool_catalog.presentation.program_presenter import ProgramPresenter
from afterschool_catalog.use_cases.browse_programs import BrowsePrograms
from afterschool_catalog.use_cases.select_program import SelectProgram

POSTGRES = DiscoverySettings(catalog_backend="postgres")
MEMORY = DiscoverySettings(catalog_backend="memory")


# ==============================================================================
# get_program_catalog_gateway()
# ==============================================================================


def test_gateway_is_generator() -> None:
    """Generator dependency (required for per-request cleanup)."""
    assert isinstance(get_program_catalog_gateway(MEMORY), GeneratorType)


def test_postgres_gateway_uses_per_request_session() -> None:
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch(
        "afterschool_catalog.entrypoints.http.dependencies.get_session",
        return_value=mock_context_manager,
    ):
        generator = get_program_catalog_gateway(POSTGRES)
        gateway = next(generator)

        assert isinstance(gateway, PostgresProgramCatalog)
        assert gateway._session is mock_session

        with pytest.raises(StopIteration):
            next(generator)

    mock_context_manager.__exit__.assert_called_once()


def test_memory_gateway_serves_sample_catalog() -> None:
    with patch("afterschool_catalog.entrypoints.http.dependencies.get_session") as get_session:
        gateway = next(get_program_catalog_gateway(MEMORY))

    assert isinstance(gateway, InMemoryProgramCatalog)
    assert gateway is get_sample_catalog()
    assert len(gateway.list_all()) > 0
    get_session.assert_not_called()


# ==============================================================================
# Use Case Factories
# ==============================================================================


def test_presenter_uses_configured_currency(make_program) -> None:
    presenter = get_presenter(DiscoverySettings(currency_symbol="$"))

    assert isinstance(presenter, ProgramPresenter)
    assert presenter.to_view_model(make_program()).price_label == "$150.00"


def test_browse_use_case_wiring() -> None:
    gateway = InMemoryProgramCatalog()
    settings = DiscoverySettings(page_size=7)

    use_case = get_browse_programs_use_case(gateway, ProgramPresenter(), settings)

    assert isinstance(use_case, BrowsePrograms)
    assert use_case._paginator.page_size == 7
    assert use_case._paginator._gateway is gateway


def test_browse_use_case_is_fresh_per_call() -> None:
    gateway = InMemoryProgramCatalog()

    first = get_browse_programs_use_case(gateway, ProgramPresenter(), MEMORY)
    second = get_browse_programs_use_case(gateway, ProgramPresenter(), MEMORY)

    assert first is not second


def test_select_use_case_wiring() -> None:
    gateway = InMemoryProgramCatalog()

    use_case = get_select_program_use_case(gateway, ProgramPresenter())

    assert isinstance(use_case, SelectProgram)
    assert use_case._gateway is gateway
