"""API test fixtures: FastAPI test client wired to the in-memory database.

Invariants:
    - app.state carries session managers bound to the test engine (lifespan does not run)
    - get_settings overridden: low bcrypt cost, no admin key unless a test sets one

Design Decisions:
    - Managers built with __new__: the real constructor creates a pooled engine,
      the tests need the shared in-memory one
"""

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from storefront.config import Settings, get_settings
from storefront.core.passwords import hash_password
from storefront.infrastructure.database import DatabaseSessionManager
from storefront.main import app
from storefront.models.product import Product
from storefront.models.user import User

STATE_ATTRS = {"users_db": "users", "products_db": "products"}


def _fake_manager(name, engine, session_factory) -> DatabaseSessionManager:
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.name = name
    manager.engine = engine
    manager._session_factory = session_factory
    return manager


def make_settings(**overrides) -> Settings:
    values = {"bcrypt_rounds": 4, "admin_key": None, **overrides}
    return Settings(_env_file=None, **values)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client; both datasets share the test engine."""
    for attr, name in STATE_ATTRS.items():
        setattr(app.state, attr, _fake_manager(name, test_engine, test_session_factory))
    app.dependency_overrides[get_settings] = lambda: make_settings()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    for attr in STATE_ATTRS:
        delattr(app.state, attr)


@pytest.fixture
def admin_key():
    """Configure an admin key for the current test."""
    key = "letmein"
    app.dependency_overrides[get_settings] = lambda: make_settings(admin_key=key)
    return key


@pytest.fixture
async def broken_client():
    """Client whose databases have no tables: every query is a storage failure."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    for attr, name in STATE_ATTRS.items():
        setattr(app.state, attr, _fake_manager(name, engine, factory))
    app.dependency_overrides[get_settings] = lambda: make_settings()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    for attr in STATE_ATTRS:
        delattr(app.state, attr)
    await engine.dispose()


@pytest.fixture
async def seed_users(test_db):
    """Ann has a bcrypt credential; Bo still has legacy plaintext."""
    users = [
        User(full_name="Ann Lee", nick_name="ann", email="ann@example.com",
             password=hash_password("s3cret", 4), phone="555-0100"),
        User(full_name="Bo Chen", email="bo@example.com", password="hunter2"),
    ]
    test_db.add_all(users)
    await test_db.commit()
    return users


@pytest.fixture
async def seed_products(test_db):
    products = [
        Product(name="Desk", description="Oak desk", price=Decimal("120.00"), stock=2),
        Product(name="Lamp", price=Decimal("19.90"), stock=10),
    ]
    test_db.add_all(products)
    await test_db.commit()
    return products
