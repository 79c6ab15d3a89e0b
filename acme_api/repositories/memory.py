"""In-memory repositories, used by unit tests and local experiments."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal

from acme_api.domain.entities import CarBrand, CarInsuranceQuote


class InMemoryCarBrandRepository:
    def __init__(self, brands: Iterable[CarBrand] = ()):
        self._brands = {brand.id: brand for brand in brands}

    def find_by_id(self, brand_id: int) -> CarBrand | None:
        return self._brands.get(brand_id)


class InMemoryCarInsuranceQuoteRepository:
    """Quote store backed by a dict.

    Ids start at 1 and are handed out under a lock, so concurrent savers
    never share an id.
    """

    def __init__(self):
        self._quotes: dict[int, CarInsuranceQuote] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(
        self,
        age_of_driver: int,
        monthly_premium: Decimal,
        yearly_premium: Decimal,
    ) -> CarInsuranceQuote:
        with self._lock:
            quote = CarInsuranceQuote(
                id=next(self._ids),
                age_of_driver=age_of_driver,
                monthly_premium=monthly_premium,
                yearly_premium=yearly_premium,
                created_on=datetime.now(timezone.utc),
            )
            self._quotes[quote.id] = quote
        return quote

    def load(self, quote_id: int) -> CarInsuranceQuote | None:
        return self._quotes.get(quote_id)

    def __len__(self) -> int:
        return len(self._quotes)
