from datetime import datetime

from pydantic import Field

from rental_api.schemas.base import CamelModel, RequiredStr, utcnow


class StoreDocument(CamelModel):
    address: RequiredStr
    city: RequiredStr
    constituency: RequiredStr
    email: RequiredStr
    phone_number: RequiredStr
    image_url: RequiredStr
    filename: RequiredStr
    created_at: datetime = Field(default_factory=utcnow)


class StoreResponse(StoreDocument):
    id: str = Field(serialization_alias="_id")

    model_config = {"from_attributes": True}
