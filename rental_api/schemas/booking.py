from datetime import datetime

from pydantic import Field

from rental_api.schemas.base import CamelModel, RequiredStr, utcnow


class BookingDocument(CamelModel):
    car_id: RequiredStr
    car_image: RequiredStr
    first_name: RequiredStr
    last_name: RequiredStr
    contact_info: RequiredStr
    pickup_location: RequiredStr
    pickup_date: datetime
    return_date: datetime
    rental_days: int
    created_at: datetime = Field(default_factory=utcnow)


class BookingResponse(BookingDocument):
    id: str = Field(serialization_alias="_id")

    model_config = {"from_attributes": True}
