"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite database, app with the database dependency
overridden, HTTP clients (anonymous and logged in), seeded admin user
Dependencies: pytest, pytest-asyncio, sqlalchemy, httpx, fastapi
System role: Test infrastructure and fixture management
"""

import uuid

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from elham.boundary.db import models  # noqa: F401  (registers tables)
from elham.boundary.db.base import Base

ADMIN_EMAIL = "admin@elham.test"
ADMIN_PASSWORD = "correct horse battery"
ADMIN_NAME = "Amina"


@pytest.fixture
async def db_engine():
    """
    Create in-memory SQLite async engine with every table.

    StaticPool keeps a single connection so all sessions see the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(session_factory):
    """
    Database session for direct service and CRUD tests.

    Yields:
        AsyncSession: Test database session
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def app(session_factory):
    """FastAPI app whose request sessions come from the test database."""
    from elham.api.main import create_app
    from elham.boundary.db.connection import get_async_db

    application = create_app()

    async def override_get_async_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_async_db] = override_get_async_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """Anonymous HTTP client; keeps cookies between requests."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http


@pytest.fixture
async def admin_user(session_factory):
    """Admin account hashed with a low bcrypt cost to keep tests fast."""
    from elham.boundary.db.CRUD.admin_crud import admin_user_crud
    from elham.core.security import hash_password

    async with session_factory() as session:
        user = await admin_user_crud.create(
            session,
            email=ADMIN_EMAIL,
            password_hash=hash_password(ADMIN_PASSWORD, rounds=4),
            name=ADMIN_NAME,
            role="admin",
        )
        await session.commit()
        return user


@pytest.fixture
async def admin_client(client, admin_user):
    """HTTP client carrying a valid admin session cookie."""
    response = await client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_identity():
    """Identity returned by an overridden require_admin dependency."""
    from elham.models.auth import AdminIdentity

    return AdminIdentity(id=uuid.uuid4(), email=ADMIN_EMAIL, name=ADMIN_NAME, role="admin")


@pytest.fixture
def admin_credentials() -> dict[str, str]:
    """Login body matching the seeded admin user."""
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
