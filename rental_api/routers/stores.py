import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from rental_api.dependencies import get_stores
from rental_api.schemas.store import StoreResponse
from rental_api.services.entity_store import Collection, store_errors
from rental_api.utils.exceptions import NotFoundError
from rental_api.utils.response import message_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stores", tags=["stores"])

STORE_NOT_FOUND = "Store not found"


def _serialize(store) -> dict:
    return StoreResponse.model_validate(store).model_dump(mode="json", by_alias=True)


@router.post("", status_code=201)
async def add_store(payload: dict[str, Any] = Body(...), stores: Collection = Depends(get_stores)):
    logger.info("Received store location in %s", payload.get("city"))
    with store_errors("Failed to add store"):
        store = await stores.insert(payload)
    logger.info("Saved store %s", store.id)
    return message_response("Store added successfully!", store=_serialize(store))


@router.get("")
async def list_stores(stores: Collection = Depends(get_stores)):
    with store_errors("Failed to fetch stores"):
        rows = await stores.find_all()
    logger.info("Fetched %d stores", len(rows))
    return [_serialize(s) for s in rows]


@router.put("/{store_id}")
async def update_store(
    store_id: str,
    payload: dict[str, Any] = Body(...),
    stores: Collection = Depends(get_stores),
):
    with store_errors("Failed to update store"):
        store = await stores.update_by_id(store_id, payload)
    if store is None:
        raise NotFoundError(STORE_NOT_FOUND)
    return message_response("Store updated successfully", store=_serialize(store))


@router.delete("/{store_id}")
async def delete_store(store_id: str, stores: Collection = Depends(get_stores)):
    with store_errors("Failed to delete store"):
        store = await stores.delete_by_id(store_id)
    if store is None:
        raise NotFoundError(STORE_NOT_FOUND)
    logger.info("Deleted store %s", store.id)
    return message_response("Store deleted successfully", store=_serialize(store))
