import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError

from rental_api.dependencies import get_admins
from rental_api.models import Admin
from rental_api.schemas.admin import AdminRegister, AdminResponse, LoginRequest
from rental_api.services.entity_store import Collection, store_errors
from rental_api.services.passwords import hash_password, password_too_long, verify_password
from rental_api.utils.exceptions import AuthenticationError, ClientInputError, ConflictError
from rental_api.utils.response import message_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admins", tags=["admins"])

EMAIL_TAKEN = "Email already registered."


def _serialize(admin) -> dict:
    return AdminResponse.model_validate(admin).model_dump(mode="json", by_alias=True)


@router.post("", status_code=201)
async def register_admin(payload: AdminRegister, admins: Collection = Depends(get_admins)):
    if not payload.name or not payload.email or not payload.password:
        raise ClientInputError("Name, email, and password are required.")
    if password_too_long(payload.password):
        raise ClientInputError("Password must be at most 72 bytes.")

    with store_errors("Failed to register admin"):
        if await admins.find_one(email=payload.email) is not None:
            raise ConflictError(EMAIL_TAKEN)

        doc = {
            "name": payload.name,
            "email": payload.email,
            "password_hash": hash_password(payload.password),
        }
        if payload.registered_at is not None:
            doc["registered_at"] = payload.registered_at
        try:
            admin = await admins.insert(doc)
        except IntegrityError:
            # Lost a race with a concurrent registration; the unique index decides.
            await admins.session.rollback()
            raise ConflictError(EMAIL_TAKEN)

    logger.info("Registered admin %s", admin.id)
    return message_response("Admin registered successfully!", admin=_serialize(admin))


@router.get("")
async def list_admins(admins: Collection = Depends(get_admins)):
    with store_errors("Failed to fetch admins"):
        rows = await admins.find_all(order_by=Admin.registered_at.desc())
    return [_serialize(a) for a in rows]


@router.post("/login")
async def login(payload: LoginRequest, admins: Collection = Depends(get_admins)):
    if not payload.email or not payload.password:
        raise ClientInputError("Email and password are required.")

    with store_errors("Failed to login"):
        admin = await admins.find_one(email=payload.email)

    if admin is None or not verify_password(payload.password, admin.password_hash):
        raise AuthenticationError()

    return message_response("Login successful", admin=_serialize(admin))
