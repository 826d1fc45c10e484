import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import fleet.models  # noqa: F401
from fleet.config import settings
from fleet.database import Base, get_db
from fleet.main import app
from fleet.schemas.driver import DriverCreate
from fleet.schemas.vehicle import VehicleCreate
from fleet.services.drivers import create_driver
from fleet.services.vehicles import create_vehicle
from fleet.store import Stores


@pytest.fixture(autouse=True)
def disable_api_key():
    # Disable API key auth for tests
    settings.api_key = ""


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def stores(db_session):
    return Stores.from_session(db_session)


@pytest_asyncio.fixture
async def client(db_session):
    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def vehicle(stores):
    result = await create_vehicle(
        stores,
        VehicleCreate(registration_number="ABC-1", model="Transit", capacity=4, location="Depot"),
    )
    return result.value


@pytest_asyncio.fixture
async def driver(stores):
    result = await create_driver(
        stores,
        DriverCreate(name="Amina Odhiambo", license_number="DL-1001", contact_info="+254700000001"),
        caller="principal-a",
    )
    return result.value
