from sqlalchemy import Column, Integer, Numeric, String

from acme_api.db.base import Base


class CarBrand(Base):
    __tablename__ = "car_brands"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
    minimum_driver_age = Column(Integer, nullable=False)
    yearly_premium = Column(Numeric(12, 2), nullable=False)
