import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from rental_api.dependencies import get_cars
from rental_api.schemas.car import CarResponse
from rental_api.services.entity_store import Collection, store_errors
from rental_api.utils.exceptions import NotFoundError
from rental_api.utils.response import message_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])

CAR_NOT_FOUND = "Car not found"


def _serialize(car) -> dict:
    return CarResponse.model_validate(car).model_dump(mode="json", by_alias=True)


@router.post("", status_code=201)
async def add_car(payload: dict[str, Any] = Body(...), cars: Collection = Depends(get_cars)):
    logger.info("Received car listing: %s %s", payload.get("make"), payload.get("model"))
    with store_errors("Failed to add car"):
        car = await cars.insert(payload)
    logger.info("Saved car %s", car.id)
    return message_response("Car added successfully!", car=_serialize(car))


@router.get("")
async def list_cars(cars: Collection = Depends(get_cars)):
    with store_errors("Failed to fetch cars"):
        rows = await cars.find_all()
    logger.info("Fetched %d cars", len(rows))
    return [_serialize(c) for c in rows]


@router.get("/{car_id}")
async def get_car(car_id: str, cars: Collection = Depends(get_cars)):
    with store_errors("Failed to fetch car"):
        car = await cars.find_by_id(car_id)
    if car is None:
        raise NotFoundError(CAR_NOT_FOUND)
    return _serialize(car)


@router.put("/{car_id}")
async def update_car(
    car_id: str,
    payload: dict[str, Any] = Body(...),
    cars: Collection = Depends(get_cars),
):
    with store_errors("Failed to update car"):
        car = await cars.update_by_id(car_id, payload)
    if car is None:
        raise NotFoundError(CAR_NOT_FOUND)
    return message_response("Car updated successfully", car=_serialize(car))


@router.delete("/{car_id}")
async def delete_car(car_id: str, cars: Collection = Depends(get_cars)):
    with store_errors("Failed to delete car"):
        car = await cars.delete_by_id(car_id)
    if car is None:
        raise NotFoundError(CAR_NOT_FOUND)
    logger.info("Deleted car %s", car.id)
    return message_response("Car deleted successfully", car=_serialize(car))
