from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

# Decimal amounts go over the wire as JSON numbers, not strings.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CalculateQuoteRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    age_of_driver: int = Field(..., strict=True, description="The age of the driver. Minimum 18 years.", examples=[18])
    car_id: int = Field(..., strict=True, description="The ID of the car brand", examples=[1])
    purchase_price: Decimal = Field(..., allow_inf_nan=False, description="The purchase price of the car.", examples=[35000])

    @field_validator("purchase_price", mode="before")
    @classmethod
    def require_number(cls, v):
        """Reject booleans and strings, which would otherwise be coerced to a number."""
        if isinstance(v, (bool, str)):
            raise ValueError("Purchase price must be a number")
        return v


class CarInsuranceQuote(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int = Field(..., description="The ID of the car insurance quote")
    monthly_premium: Money = Field(..., description="The monthly price of the car insurance premium.")
    yearly_premium: Money = Field(..., description="The yearly price of the car insurance premium.")
