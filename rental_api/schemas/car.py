from datetime import datetime

from pydantic import Field

from rental_api.schemas.base import CamelModel, RequiredStr, utcnow


class CarDocument(CamelModel):
    make: RequiredStr
    model: RequiredStr
    year: int
    price_per_day: float
    image_url: RequiredStr
    filename: RequiredStr
    type: RequiredStr
    seats: int
    transmission: RequiredStr
    features: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)


class CarResponse(CarDocument):
    id: str = Field(serialization_alias="_id")

    model_config = {"from_attributes": True}
