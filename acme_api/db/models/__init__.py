from acme_api.db.models.car_brand import CarBrand
from acme_api.db.models.car_insurance_quote import CarInsuranceQuote

__all__ = ["CarBrand", "CarInsuranceQuote"]
