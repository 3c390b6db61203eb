"""Shared test fixtures and configuration."""
import pytest
import os
from unittest.mock import AsyncMock
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PURGOMALUM_URL", "http://purgomalum.test")
os.environ.setdefault("KITCHENRIDERS_URL", "http://kitchenriders.test")

from kitchenpos.main import app
from kitchenpos.db.database import get_db
from kitchenpos.db.models import Base
from kitchenpos.core.dependencies import get_kitchenriders_client, get_profanity_client
from kitchenpos.services.catalog.menu_groups import MenuGroupService
from kitchenpos.services.catalog.menus import MenuService
from kitchenpos.services.catalog.products import ProductService
from kitchenpos.services.clients.kitchenriders import KitchenridersClient
from kitchenpos.services.clients.profanity import ProfanityClient
from kitchenpos.services.ordering.service import OrderService
from kitchenpos.services.tables.order_tables import OrderTableService


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_db(test_db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def profanity_client():
    """Profanity client that flags nothing unless told otherwise."""
    client = AsyncMock(spec=ProfanityClient)
    client.contains_profanity.return_value = False
    return client


@pytest.fixture
def kitchenriders_client():
    """Rider dispatch client that records its calls."""
    return AsyncMock(spec=KitchenridersClient)


@pytest.fixture
def product_service(test_db, profanity_client):
    return ProductService(test_db, profanity_client)


@pytest.fixture
def menu_group_service(test_db):
    return MenuGroupService(test_db)


@pytest.fixture
def menu_service(test_db, profanity_client):
    return MenuService(test_db, profanity_client)


@pytest.fixture
def order_table_service(test_db):
    return OrderTableService(test_db)


@pytest.fixture
def order_service(test_db, kitchenriders_client):
    return OrderService(test_db, kitchenriders_client)


@pytest.fixture
def override_get_db(test_db):
    """Override get_db dependency with test database."""
    async def _override_get_db():
        yield test_db
    return _override_get_db


@pytest.fixture
def overridden_app(override_get_db, profanity_client, kitchenriders_client):
    """App wired to the test database and the mocked clients."""
    # Override dependencies
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_profanity_client] = lambda: profanity_client
    app.dependency_overrides[get_kitchenriders_client] = lambda: kitchenriders_client

    yield app

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(overridden_app):
    """Create an async API client with overrides, sharing the test event loop."""
    async with AsyncClient(
        transport=ASGITransport(app=overridden_app), base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
async def server_error_client(overridden_app):
    """API client that receives 500 responses instead of re-raised app errors."""
    transport = ASGITransport(app=overridden_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
