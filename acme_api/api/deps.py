from fastapi import Depends
from sqlalchemy.orm import Session

from acme_api.db import SessionLocal
from acme_api.repositories.car_brand import SqlAlchemyCarBrandRepository
from acme_api.repositories.car_insurance_quote import SqlAlchemyCarInsuranceQuoteRepository
from acme_api.services.quote import QuoteService


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_quote_service(db: Session = Depends(get_db)) -> QuoteService:
    """Build a quote service on top of the request's database session."""
    return QuoteService(
        SqlAlchemyCarBrandRepository(db),
        SqlAlchemyCarInsuranceQuoteRepository(db),
    )
