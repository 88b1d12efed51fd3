import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rental_api.config import settings
from rental_api.database import create_tables
from rental_api.logging_config import setup_logging
from rental_api.routers.admins import router as admins_router
from rental_api.routers.bookings import router as bookings_router
from rental_api.routers.cars import router as cars_router
from rental_api.routers.stores import router as stores_router
from rental_api.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    await create_tables()
    logger.info("Database ready")
    yield


app = FastAPI(
    title="Car Rental API",
    description="Cars, store locations, bookings and administrators",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(cars_router, prefix="/api")
app.include_router(stores_router, prefix="/api")
app.include_router(bookings_router, prefix="/api")
app.include_router(admins_router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "car-rental-api", "version": VERSION}


def run() -> None:
    setup_logging(settings.log_level)
    logger.info("Backend server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
