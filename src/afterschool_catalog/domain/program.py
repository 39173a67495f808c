from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from afterschool_catalog.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class ProgramRecord:
    """An afterschool program as owned by the catalog. Read-only for discovery."""

    id: str
    title: str
    description: str
    schedule: str
    age_range: str  # free-form, e.g. "8-12 years"
    price: Decimal
    pricing_period: str
    spots_available: int
    gradient_class: str | None = None
    icon_path: str | None = None

    def validate(self) -> None:
        """
        Validate catalog invariants.

        Raises:
            ValidationError: If price or spots are negative, or price is not a Decimal
        """
        errors: list[dict[str, str]] = []

        # Guardrails: prevent float leakage past boundary
        if not isinstance(self.price, Decimal):
            errors.append(
                {
                    "field": "price",
                    "message": "Must be Decimal (no floats past the boundary)",
                    "code": "INVALID_TYPE",
                }
            )
        elif self.price < 0:
            errors.append({"field": "price", "message": "Must be >= 0", "code": "INVALID_VALUE"})

        if self.spots_available < 0:
            errors.append(
                {"field": "spots_available", "message": "Must be >= 0", "code": "INVALID_VALUE"}
            )

        if errors:
            raise ValidationError(errors=errors, program_id=self.id)

    @property
    def is_free(self) -> bool:
        return self.price == 0

    @property
    def is_sold_out(self) -> bool:
        return self.spots_available <= 0
