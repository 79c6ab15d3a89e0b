from sqlalchemy.orm import Session

from acme_api.db.models.car_brand import CarBrand as CarBrandModel
from acme_api.domain.entities import CarBrand


def _to_entity(brand: CarBrandModel) -> CarBrand:
    return CarBrand(
        id=brand.id,
        name=brand.name,
        minimum_driver_age=brand.minimum_driver_age,
        yearly_premium=brand.yearly_premium,
    )


class SqlAlchemyCarBrandRepository:
    """Read-only access to the seeded car brands."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, brand_id: int) -> CarBrand | None:
        brand = self.db.query(CarBrandModel).filter(CarBrandModel.id == brand_id).first()
        return _to_entity(brand) if brand else None
