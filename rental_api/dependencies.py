from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rental_api.database import get_db
from rental_api.models import Admin, Booking, Car, Store
from rental_api.schemas.admin import AdminDocument
from rental_api.schemas.booking import BookingDocument
from rental_api.schemas.car import CarDocument
from rental_api.schemas.store import StoreDocument
from rental_api.services.entity_store import Collection


def get_cars(db: AsyncSession = Depends(get_db)) -> Collection:
    return Collection(db, Car, CarDocument)


def get_stores(db: AsyncSession = Depends(get_db)) -> Collection:
    return Collection(db, Store, StoreDocument)


def get_bookings(db: AsyncSession = Depends(get_db)) -> Collection:
    return Collection(db, Booking, BookingDocument)


def get_admins(db: AsyncSession = Depends(get_db)) -> Collection:
    return Collection(db, Admin, AdminDocument)
