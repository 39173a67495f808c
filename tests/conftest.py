"""Shared fixtures for the test suite."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from afterschool_catalog.domain.program import ProgramRecord

ProgramFactory = Callable[..., ProgramRecord]


@pytest.fixture()
def make_program() -> ProgramFactory:
    """Factory for ProgramRecord with sensible defaults; override any field."""
    counter = iter(range(1, 10_000))

    def _make(title: str = "After School Soccer", **overrides: Any) -> ProgramRecord:
        fields: dict[str, Any] = {
            "id": str(uuid.UUID(int=next(counter))),
            "title": title,
            "description": f"{title} for kids",
            "schedule": "Mon, Wed 3:00-4:30 PM",
            "age_range": "6-10 years",
            "price": Decimal("150.00"),
            "pricing_period": "per month",
            "spots_available": 10,
        }
        fields.update(overrides)
        return ProgramRecord(**fields)

    return _make
