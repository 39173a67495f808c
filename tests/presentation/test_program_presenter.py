"""Tests for ProgramPresenter (record → card)."""

from __future__ import annotations

from decimal import Decimal

import pytest

from afterschool_catalog.presentation.program_presenter import (
    DEFAULT_GRADIENT_CLASS,
    DEFAULT_ICON_PATH,
    ProgramPresenter,
    format_price,
    spots_badge,
)


@pytest.mark.parametrize(
    ("price", "expected"),
    [
        (Decimal("0"), "Free"),
        (Decimal("0.00"), "Free"),
        (Decimal("150"), "€150.00"),
        (Decimal("150.00"), "€150.00"),
        (Decimal("99.5"), "€99.50"),
        (Decimal("12.345"), "€12.35"),
        (Decimal("0.01"), "€0.01"),
    ],
)
def test_format_price(price: Decimal, expected: str) -> None:
    assert format_price(price) == expected


def test_format_price_uses_currency_symbol() -> None:
    assert format_price(Decimal("150"), "$") == "$150.00"


@pytest.mark.parametrize(
    ("spots", "expected"),
    [(0, "Sold out"), (1, "1 spots left!"), (5, "5 spots left!"), (6, None), (20, None)],
)
def test_spots_badge(spots: int, expected: str | None) -> None:
    assert spots_badge(spots) == expected


def test_to_view_model(make_program) -> None:
    program = make_program(
        "Art Adventures",
        age_range="6-10 years",
        price=Decimal("120"),
        pricing_period="per month",
        spots_available=3,
        gradient_class="bg-gradient-to-br from-pink-400 to-purple-600",
        icon_path="M1 1",
    )

    view = ProgramPresenter(currency_symbol="€").to_view_model(program)

    assert view.id == program.id
    assert view.title == "Art Adventures"
    assert view.price_label == "€120.00"
    assert view.period == "per month"
    assert view.spots_left == 3
    assert view.spots_badge == "3 spots left!"
    assert view.gradient_class == "bg-gradient-to-br from-pink-400 to-purple-600"
    assert view.icon_path == "M1 1"


@pytest.mark.parametrize("visual", [None, "", "   "])
def test_missing_visuals_fall_back_to_defaults(make_program, visual: str | None) -> None:
    view = ProgramPresenter().to_view_model(make_program(gradient_class=visual, icon_path=visual))

    assert view.gradient_class == DEFAULT_GRADIENT_CLASS
    assert view.icon_path == DEFAULT_ICON_PATH


def test_free_program_card(make_program) -> None:
    view = ProgramPresenter().to_view_model(make_program(price=Decimal("0.00")))

    assert view.price_label == "Free"


def test_to_view_models_preserves_order(make_program) -> None:
    programs = [make_program("B"), make_program("A")]

    assert [view.title for view in ProgramPresenter().to_view_models(programs)] == ["B", "A"]
