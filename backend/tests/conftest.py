"""
Store Admin Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine / session_factory: in-memory SQLite with all tables
    ├── test_client: HTTPX AsyncClient bound to the app, DB overridden
    ├── auth_headers: factory for Authorization headers of a subject
    └── owned_store / catalog: seeded rows for API tests
"""

import os
import uuid

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTH_JWT_KEY"] = "test-signing-key-0123456789abcdef0123456789"
os.environ["AUTH_JWT_ALGORITHM"] = "HS256"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Dict
from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.context import RequestContext
from app.database import Base, get_db_session
from app.models import Billboard, Category, Color, Image, Product, Size, Store

OWNER_ID = "user_owner"
STRANGER_ID = "user_stranger"


def make_token(subject: str, **claims) -> str:
    payload = {
        "sub": subject,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        **claims,
    }
    return jwt.encode(payload, settings.auth_jwt_key, algorithm=settings.auth_jwt_algorithm)


def stamp_defaults(session) -> None:
    """Assign the column defaults a real flush would give every added record."""
    now = datetime.now(timezone.utc)
    for call in session.add.call_args_list:
        record = call.args[0]
        record.id = record.id or str(uuid.uuid4())
        record.created_at = record.created_at or now
        record.updated_at = record.updated_at or now


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalars.return_value.first.return_value = store

    flush() applies column defaults to added records, so response models
    can be built from them.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    session.flush = AsyncMock(side_effect=lambda *args, **kwargs: stamp_defaults(session))
    return session


@pytest.fixture
def owner_ctx() -> RequestContext:
    return RequestContext(subject_id=OWNER_ID, request_id="test-rid")


@pytest.fixture
def anonymous_ctx() -> RequestContext:
    return RequestContext(subject_id=None, request_id="test-rid")


# ══════════════════════════════════════════════════════════════════════════
# Database fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    # StaticPool: every session shares the one in-memory database
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    get_db_session is overridden so every request uses the in-memory DB.
    """
    from app.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[str], Dict[str, str]]:
    def _headers(subject: str = OWNER_ID) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(subject)}"}
    return _headers


# ══════════════════════════════════════════════════════════════════════════
# Seed data
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def owned_store(session_factory) -> Store:
    async with session_factory() as session:
        store = Store(name="Main Street", user_id=OWNER_ID)
        session.add(store)
        await session.commit()
        return store


@pytest_asyncio.fixture
async def catalog(session_factory, owned_store) -> Dict[str, object]:
    """One billboard, category, size and color in the owned store."""
    async with session_factory() as session:
        billboard = Billboard(
            store_id=owned_store.id, label="Summer Sale", image_url="https://x/img.png"
        )
        session.add(billboard)
        await session.flush()

        category = Category(store_id=owned_store.id, billboard_id=billboard.id, name="Shirts")
        size = Size(store_id=owned_store.id, name="Large", value="L")
        color = Color(store_id=owned_store.id, name="Black", value="#000000")
        session.add_all([category, size, color])
        await session.commit()

        return {
            "store": owned_store,
            "billboard": billboard,
            "category": category,
            "size": size,
            "color": color,
        }


@pytest.fixture
def add_product(session_factory, catalog):
    """Factory inserting a product in the owned store with explicit flags/time."""

    async def _add(
        name: str,
        *,
        is_featured: bool = False,
        is_archived: bool = False,
        created_at: datetime = None,
        category_id: str = None,
        price: str = "19.99",
    ) -> Product:
        async with session_factory() as session:
            product = Product(
                store_id=catalog["store"].id,
                name=name,
                price=Decimal(price),
                category_id=category_id or catalog["category"].id,
                size_id=catalog["size"].id,
                color_id=catalog["color"].id,
                is_featured=is_featured,
                is_archived=is_archived,
                images=[Image(url=f"https://x/{name}.png", position=0)],
            )
            if created_at is not None:
                product.created_at = created_at
            session.add(product)
            await session.commit()
            return product

    return _add
