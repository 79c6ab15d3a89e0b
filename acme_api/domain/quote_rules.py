"""Business rules that decide whether a car insurance quote can be issued.

The rules themselves are plain values here. Evaluating them in the right
order (and talking to repositories) is the job of the quote service.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

MINIMUM_DRIVER_AGE = 18
MINIMUM_PURCHASE_PRICE = Decimal(5000)
MONTHS_PER_YEAR = 12

# Premiums are quoted in whole currency units.
_WHOLE_UNIT = Decimal(1)


class RuleViolationKind(str, Enum):
    DRIVER_TOO_YOUNG = "DRIVER_TOO_YOUNG"
    PURCHASE_PRICE_TOO_LOW = "PURCHASE_PRICE_TOO_LOW"
    UNKNOWN_BRAND = "UNKNOWN_BRAND"
    RISK_TOO_HIGH = "RISK_TOO_HIGH"

    @property
    def error_name(self) -> str:
        return _ERROR_NAMES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]


# Names exposed to API consumers in 409 response bodies.
_ERROR_NAMES = {
    RuleViolationKind.DRIVER_TOO_YOUNG: "DriveTooYoungError",
    RuleViolationKind.PURCHASE_PRICE_TOO_LOW: "PurchasePriceTooLowError",
    RuleViolationKind.UNKNOWN_BRAND: "UnknownCarBrandError",
    RuleViolationKind.RISK_TOO_HIGH: "RiskTooHighError",
}

_MESSAGES = {
    RuleViolationKind.DRIVER_TOO_YOUNG: f"The driver must be at least {MINIMUM_DRIVER_AGE} years old",
    RuleViolationKind.PURCHASE_PRICE_TOO_LOW: f"The purchase price must be at least {MINIMUM_PURCHASE_PRICE}",
    RuleViolationKind.UNKNOWN_BRAND: "The car brand is unknown",
    RuleViolationKind.RISK_TOO_HIGH: "The driver is too young for this car brand",
}


@dataclass(frozen=True, slots=True)
class RuleViolation:
    """A failed business rule. Returned, never raised, by the quote service."""

    kind: RuleViolationKind

    @property
    def name(self) -> str:
        return self.kind.error_name

    @property
    def message(self) -> str:
        return self.kind.message


def monthly_premium(yearly_premium: Decimal) -> Decimal:
    """Spread a yearly premium over twelve months.

    Rounds half up to a whole currency unit, so 150 / 12 = 12.5 becomes 13.
    """
    return (Decimal(yearly_premium) / MONTHS_PER_YEAR).quantize(
        _WHOLE_UNIT, rounding=ROUND_HALF_UP
    )


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric input to Decimal without picking up float noise.

    Raises:
        ValueError: If the value is NaN or infinite.
    """
    if isinstance(value, float):
        value = Decimal(str(value))
    elif not isinstance(value, Decimal):
        value = Decimal(value)
    if not value.is_finite():
        raise ValueError(f"Expected a finite number, got {value}")
    return value
