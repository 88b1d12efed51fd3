import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from rental_api.database import Base, get_db
from rental_api.main import app
import rental_api.models  # noqa: F401


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_maker):
    async def _get_test_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def car_payload():
    return {
        "make": "Toyota",
        "model": "Corolla",
        "year": 2021,
        "pricePerDay": 45.5,
        "imageUrl": "https://cdn.example.com/cars/corolla.jpg",
        "filename": "corolla.jpg",
        "type": "Sedan",
        "seats": 5,
        "transmission": "Automatic",
        "features": ["Air conditioning", "Bluetooth"],
    }


@pytest.fixture
def store_payload():
    return {
        "address": "12 Harbour Road",
        "city": "Nairobi",
        "constituency": "Westlands",
        "email": "westlands@example.com",
        "phoneNumber": "+254700000000",
        "imageUrl": "https://cdn.example.com/stores/westlands.jpg",
        "filename": "westlands.jpg",
    }


@pytest.fixture
def booking_payload():
    return {
        "carImage": "https://cdn.example.com/cars/snapshot.jpg",
        "firstName": "Amina",
        "lastName": "Otieno",
        "contactInfo": "amina@example.com",
        "pickupLocation": "12 Harbour Road, Nairobi",
        "pickupDate": "2026-11-01T09:00:00Z",
        "returnDate": "2026-11-04T09:00:00Z",
        "rentalDays": 3,
    }
