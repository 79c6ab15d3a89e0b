"""Quote service: evaluates the business rules and issues car insurance quotes."""

import logging
from decimal import Decimal

from acme_api.domain.entities import Premium
from acme_api.domain.quote_rules import (
    MINIMUM_DRIVER_AGE,
    MINIMUM_PURCHASE_PRICE,
    RuleViolation,
    RuleViolationKind,
    monthly_premium,
    to_decimal,
)
from acme_api.repositories.base import CarBrandRepository, CarInsuranceQuoteRepository

logger = logging.getLogger(__name__)


class QuoteService:
    def __init__(
        self,
        brand_repository: CarBrandRepository,
        quote_repository: CarInsuranceQuoteRepository,
    ):
        self.brand_repository = brand_repository
        self.quote_repository = quote_repository

    def calculate_premium(
        self,
        age_of_driver: int,
        car_id: int,
        purchase_price: Decimal | int | float,
    ) -> Premium | RuleViolation:
        """
        Calculate and persist a premium for the given driver and car.

        Rules are checked in this order, stopping at the first failure:
        - Driver must be at least 18
        - Purchase price must be at least 5000
        - Car brand must exist
        - Driver must meet the brand's minimum age

        The input-only checks run before the brand lookup, so an underage
        driver with an unknown brand is always reported as too young.

        Returns:
            The persisted Premium, or the RuleViolation that stopped it.
            Nothing is written when a rule fails.

        Storage errors raised by the repositories are not caught here.
        A NaN or infinite purchase price raises ValueError.
        """
        if age_of_driver < MINIMUM_DRIVER_AGE:
            return self._reject(RuleViolationKind.DRIVER_TOO_YOUNG)

        if to_decimal(purchase_price) < MINIMUM_PURCHASE_PRICE:
            return self._reject(RuleViolationKind.PURCHASE_PRICE_TOO_LOW)

        brand = self.brand_repository.find_by_id(car_id)
        if brand is None:
            return self._reject(RuleViolationKind.UNKNOWN_BRAND)

        if age_of_driver < brand.minimum_driver_age:
            return self._reject(RuleViolationKind.RISK_TOO_HIGH)

        quote = self.quote_repository.save(
            age_of_driver,
            monthly_premium(brand.yearly_premium),
            brand.yearly_premium,
        )
        logger.info("Created quote %s for car brand %s", quote.id, brand.name)
        return Premium.from_quote(quote)

    def get_by_id(self, quote_id: int) -> Premium | None:
        """Get a previously calculated premium, or None if there is no such quote."""
        quote = self.quote_repository.load(quote_id)
        return Premium.from_quote(quote) if quote else None

    @staticmethod
    def _reject(kind: RuleViolationKind) -> RuleViolation:
        logger.info("Quote rejected: %s", kind.value)
        return RuleViolation(kind)
