"""
Presentation layer for turning catalog records into program cards.

Keeps display concerns (price labels, badges, visual fallbacks) out of the
domain record, which stays exactly as the catalog owns it.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from afterschool_catalog.domain.discovery import ProgramView
from afterschool_catalog.domain.program import ProgramRecord
from afterschool_catalog.infra.config import DEFAULT_CURRENCY_SYMBOL

FREE_LABEL = "Free"
SOLD_OUT_LABEL = "Sold out"
LOW_SPOTS_THRESHOLD = 5

DEFAULT_GRADIENT_CLASS = "bg-gradient-to-br from-hero-blue-400 to-hero-blue-600"
DEFAULT_ICON_PATH = "M12 14l9-5-9-5-9 5 9 5zm0 7l-9-5 9-5 9 5-9 5zM3 12l9-5 9 5-9 5-9-5z"

_CENTS = Decimal("0.01")


class ProgramPresenter:
    """Maps ProgramRecord to ProgramView."""

    def __init__(self, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> None:
        self._currency_symbol = currency_symbol

    def to_view_model(self, record: ProgramRecord) -> ProgramView:
        return ProgramView(
            id=record.id,
            title=record.title,
            description=record.description,
            schedule=record.schedule,
            age_range=record.age_range,
            price_label=format_price(record.price, self._currency_symbol),
            period=record.pricing_period,
            spots_left=record.spots_available,
            spots_badge=spots_badge(record.spots_available),
            gradient_class=(record.gradient_class or "").strip() or DEFAULT_GRADIENT_CLASS,
            icon_path=(record.icon_path or "").strip() or DEFAULT_ICON_PATH,
        )

    def to_view_models(self, records: list[ProgramRecord]) -> list[ProgramView]:
        return [self.to_view_model(record) for record in records]


def format_price(price: Decimal, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Price label for a program card.

    Exactly zero renders as "Free"; anything else renders with the currency
    symbol and two decimal places (cents rounded half-up).

    Examples:
        format_price(Decimal("0")) -> "Free"
        format_price(Decimal("150")) -> "€150.00"
    """
    if price == 0:
        return FREE_LABEL

    amount = Decimal(price).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{currency_symbol}{amount}"


def spots_badge(spots_available: int) -> str | None:
    if spots_available <= 0:
        return SOLD_OUT_LABEL
    if spots_available <= LOW_SPOTS_THRESHOLD:
        return f"{spots_available} spots left!"
    return None
