# tests/conftest.py
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import os
import uuid

import pytest
import pytest_asyncio
import httpx
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("ASYNC_DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from app.main import app
from app.api.deps import build_beer_service
from app.db.session import Base, create_tables, drop_tables, engine
from app.db.session_async import AsyncSessionLocal
from app.schemas.beer import BeerCreate, BeerRead
from app.services.beer_service import BeerService


# ---------- Fixtures ----------
@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Crea las tablas en SQLite solo una vez por sesión de tests."""
    create_tables()
    yield
    drop_tables()


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest_asyncio.fixture(scope="function")
async def client():
    """Provee un AsyncClient enlazado a la app."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def async_db_session() -> AsyncSession:
    """Provee una AsyncSession para pruebas asíncronas directas."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture(scope="function")
def beer_service(async_db_session: AsyncSession) -> BeerService:
    return build_beer_service(async_db_session)


@pytest.fixture(scope="function")
def beer_payload():
    """Fábrica de candidatos válidos con nombre único."""
    def _make(**overrides) -> BeerCreate:
        data = {"name": f"Beer-{uuid.uuid4()}", "quantity": 10, "max": 50}
        data.update(overrides)
        return BeerCreate(**data)

    return _make


@pytest_asyncio.fixture(scope="function")
async def skol(beer_service: BeerService) -> BeerRead:
    return await beer_service.create(BeerCreate(name="Skol", quantity=10, max=50))
