"""Storage-agnostic repository contracts used by the quote service."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from acme_api.domain.entities import CarBrand, CarInsuranceQuote


class CarBrandRepository(Protocol):
    def find_by_id(self, brand_id: int) -> CarBrand | None: ...


class CarInsuranceQuoteRepository(Protocol):
    def save(
        self,
        age_of_driver: int,
        monthly_premium: Decimal,
        yearly_premium: Decimal,
    ) -> CarInsuranceQuote:
        """Persist a new quote, assigning its id and creation timestamp."""
        ...

    def load(self, quote_id: int) -> CarInsuranceQuote | None: ...
