"""
PetClinic Backend - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── owner_repository / visit_repository: AsyncMock repositories (no DB)
    ├── owner_service: OwnerService over the mock repositories
    ├── make_owner: factory for transient Owner graphs (pets, types)
    ├── db_session: AsyncSession on a fresh in-memory SQLite database
    └── test_client: HTTPX AsyncClient whose OwnerService uses the mocks
"""

import os

# Override settings for testing BEFORE any petclinic import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "100000"

from datetime import date
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from petclinic.database import Base
from petclinic.models import Owner, Pet, PetType
from petclinic.repositories.base import OwnerRepository, VisitRepository
from petclinic.services.owner_service import OwnerService


# ══════════════════════════════════════════════════════════════════════════
# Mocked collaborators
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def owner_repository():
    """
    AsyncMock with the OwnerRepository interface.

    Usage:
        owner_repository.find_by_first_name.return_value = [owner]
    """
    repo = AsyncMock(spec=OwnerRepository)
    repo.find_by_id.return_value = None
    repo.find_by_first_name.return_value = []
    return repo


@pytest.fixture
def visit_repository():
    repo = AsyncMock(spec=VisitRepository)
    repo.find_by_pet_id.return_value = []
    return repo


@pytest.fixture
def owner_service(owner_repository, visit_repository):
    return OwnerService(owners=owner_repository, visits=visit_repository)


@pytest.fixture
def make_owner():
    """
    Factory for transient Owner objects.

    Usage:
        owner = make_owner(id=1, first_name="George", pets=[("Leo", "cat")])
    """

    def _make(id=1, first_name="George", last_name="Franklin", pets=(), **overrides):
        owner = Owner(
            id=id,
            first_name=first_name,
            last_name=last_name,
            address=overrides.get("address", "110 W. Liberty St."),
            city=overrides.get("city", "Madison"),
            telephone=overrides.get("telephone", "6085551023"),
        )
        for index, (pet_name, type_name) in enumerate(pets, start=1):
            owner.pets.append(
                Pet(
                    id=id * 100 + index,
                    name=pet_name,
                    birth_date=date(2020, 9, 7),
                    type=PetType(name=type_name),
                )
            )
        return owner

    return _make


@pytest.fixture
def owner_payload():
    """A complete, valid owner form submission."""
    return {
        "first_name": "George",
        "last_name": "Franklin",
        "address": "110 W. Liberty St.",
        "city": "Madison",
        "telephone": "6085551023",
    }


# ══════════════════════════════════════════════════════════════════════════
# Real database (in-memory SQLite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    A fresh in-memory database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def session_factory(db_engine):
    """For tests that need a second, independent session."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


# ══════════════════════════════════════════════════════════════════════════
# HTTP client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(owner_service):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    The per-request OwnerService dependency is replaced by `owner_service`,
    so route tests configure `owner_repository` / `visit_repository` mocks.
    Redirects are not followed.

    Usage:
        async def test_find(test_client, owner_repository):
            response = await test_client.get("/owners?first_name=Geo")
    """
    from petclinic.main import app
    from petclinic.routes.owners import get_owner_service

    app.dependency_overrides[get_owner_service] = lambda: owner_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
