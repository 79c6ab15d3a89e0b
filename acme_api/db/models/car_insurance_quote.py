from sqlalchemy import Column, DateTime, Integer, Numeric

from acme_api.db.base import Base


class CarInsuranceQuote(Base):
    __tablename__ = "car_insurance_quotes"

    id = Column(Integer, primary_key=True, index=True)
    age_of_driver = Column(Integer, nullable=False)
    monthly_premium = Column(Numeric(12, 2), nullable=False)
    yearly_premium = Column(Numeric(12, 2), nullable=False)
    created_on = Column(DateTime(timezone=True), nullable=False)
