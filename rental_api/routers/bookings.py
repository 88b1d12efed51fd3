import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from rental_api.dependencies import get_bookings, get_cars
from rental_api.models import Booking
from rental_api.schemas.booking import BookingResponse
from rental_api.services.entity_store import Collection, store_errors
from rental_api.utils.exceptions import ReferentialError
from rental_api.utils.response import message_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


def _serialize(booking) -> dict:
    return BookingResponse.model_validate(booking).model_dump(mode="json", by_alias=True)


@router.post("", status_code=201)
async def create_booking(
    payload: dict[str, Any] = Body(...),
    bookings: Collection = Depends(get_bookings),
    cars: Collection = Depends(get_cars),
):
    logger.info("Received booking for car %s", payload.get("carId"))
    car_id = payload.get("carId")
    with store_errors("Failed to create booking"):
        car = await cars.find_by_id(car_id) if isinstance(car_id, str) else None
        if car is None:
            logger.error("Invalid carId: %s", car_id)
            raise ReferentialError("Invalid carId: Car not found")
        # carImage is kept as sent; listing refreshes it from the car.
        booking = await bookings.insert(payload)
    logger.info("Saved booking %s for car %s", booking.id, booking.car_id)
    return message_response("Booking created successfully!", booking=_serialize(booking))


@router.get("")
async def list_bookings(
    bookings: Collection = Depends(get_bookings),
    cars: Collection = Depends(get_cars),
):
    data = []
    with store_errors("Failed to fetch bookings"):
        rows = await bookings.find_all(order_by=Booking.created_at.desc())
        for booking in rows:
            item = _serialize(booking)
            # The car may have been deleted since booking; keep the stored image then.
            car = await cars.find_by_id(booking.car_id)
            if car is not None and car.image_url:
                item["carImage"] = car.image_url
            data.append(item)
    logger.info("Fetched %d bookings", len(data))
    return data
