from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.orm import Session

from acme_api.db.models.car_insurance_quote import (
    CarInsuranceQuote as CarInsuranceQuoteModel,
)
from acme_api.domain.entities import CarInsuranceQuote


def _to_entity(quote: CarInsuranceQuoteModel) -> CarInsuranceQuote:
    created_on = quote.created_on
    # SQLite drops tzinfo on the way back; values are always stored as UTC.
    if created_on.tzinfo is None:
        created_on = created_on.replace(tzinfo=timezone.utc)
    return CarInsuranceQuote(
        id=quote.id,
        age_of_driver=quote.age_of_driver,
        monthly_premium=quote.monthly_premium,
        yearly_premium=quote.yearly_premium,
        created_on=created_on,
    )


class SqlAlchemyCarInsuranceQuoteRepository:
    """Quote persistence on top of a SQLAlchemy session.

    The database assigns ids, which keeps them unique across concurrent
    writers. Each save commits on its own.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(
        self,
        age_of_driver: int,
        monthly_premium: Decimal,
        yearly_premium: Decimal,
    ) -> CarInsuranceQuote:
        db_quote = CarInsuranceQuoteModel(
            age_of_driver=age_of_driver,
            monthly_premium=monthly_premium,
            yearly_premium=yearly_premium,
            created_on=datetime.now(timezone.utc),
        )
        self.db.add(db_quote)
        self.db.commit()
        self.db.refresh(db_quote)
        return _to_entity(db_quote)

    def load(self, quote_id: int) -> CarInsuranceQuote | None:
        quote = (
            self.db.query(CarInsuranceQuoteModel)
            .filter(CarInsuranceQuoteModel.id == quote_id)
            .first()
        )
        return _to_entity(quote) if quote else None
