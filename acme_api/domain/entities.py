from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class CarBrand:
    id: int
    name: str
    minimum_driver_age: int
    yearly_premium: Decimal


@dataclass(frozen=True, slots=True)
class CarInsuranceQuote:
    id: int
    age_of_driver: int
    monthly_premium: Decimal
    yearly_premium: Decimal
    created_on: datetime


@dataclass(frozen=True, slots=True)
class Premium:
    """The monthly/yearly price pair handed back to callers."""

    id: int
    monthly_premium: Decimal
    yearly_premium: Decimal

    @classmethod
    def from_quote(cls, quote: CarInsuranceQuote) -> Premium:
        return cls(
            id=quote.id,
            monthly_premium=quote.monthly_premium,
            yearly_premium=quote.yearly_premium,
        )
