from datetime import datetime

from pydantic import BaseModel, Field

from rental_api.schemas.base import CamelModel, RequiredStr, utcnow


class AdminDocument(CamelModel):
    name: RequiredStr
    email: RequiredStr
    password_hash: RequiredStr
    registered_at: datetime = Field(default_factory=utcnow)


class AdminResponse(CamelModel):
    id: str = Field(serialization_alias="_id")
    name: str
    email: str
    registered_at: datetime

    model_config = {"from_attributes": True}


class AdminRegister(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    registered_at: datetime | None = Field(default=None, alias="registeredAt")


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None
