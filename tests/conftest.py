"""
Shared pytest fixtures for all tests.

This module provides common fixtures for database sessions, mock repositories,
the API client and test data.
"""

import os
from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Ensure test environment
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from app.core.domain import Address  # noqa: E402
from app.database.async_db import create_async_database_engine, create_session_maker, get_async_db  # noqa: E402
from app.database.setup import create_tables, drop_tables  # noqa: E402
from app.domains.credit.domain.entities import Credit, Customer, add_months  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the schema created."""
    engine = create_async_database_engine(TEST_DATABASE_URL)
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture
def async_session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory."""
    return create_session_maker(async_engine)


@pytest_asyncio.fixture
async def db_session(async_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    async with async_session_factory() as session:
        yield session


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def mock_customer_repository():
    """Create a mock customer repository."""
    mock = AsyncMock()
    mock.save = AsyncMock()
    mock.find_by_id = AsyncMock(return_value=None)
    mock.delete = AsyncMock()
    return mock


@pytest.fixture
def mock_credit_repository():
    """Create a mock credit repository."""
    mock = AsyncMock()
    mock.save = AsyncMock()
    mock.find_by_credit_code = AsyncMock(return_value=None)
    mock.find_all_by_customer_id = AsyncMock(return_value=[])
    return mock


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def fastapi_app(async_session_factory):
    """Create FastAPI application bound to the test database."""
    from app.core.app_factory import create_app

    app = create_app()

    async def override_get_async_db() -> AsyncGenerator[AsyncSession, None]:
        async with async_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(fastapi_app) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client over the ASGI app."""
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture
def sample_customer() -> Customer:
    """Create a sample, not yet persisted, customer."""
    return Customer(
        first_name="Tomás Calebe",
        last_name="Farias",
        cpf="517.429.568-07",
        email="tomas_farias@camarasjc.sp.gov.br",
        income=Decimal("1000.0"),
        password="JuIzRXHe1u",
        address=Address(
            zip_code="04880-033",
            street="Travessa Renascer, 806 - Recanto Campo Belo - São Paulo - SP",
        ),
    )


@pytest.fixture
def sample_credit(sample_customer: Customer, today: date) -> Credit:
    """Create a sample credit with its first installment two months ahead."""
    return Credit(
        credit_value=Decimal("1000.0"),
        day_first_installment=add_months(today, 2),
        number_of_installments=24,
        customer=sample_customer,
    )


@pytest.fixture
def customer_payload() -> dict:
    """Valid customer registration body."""
    return {
        "firstName": "Tomás Calebe",
        "lastName": "Farias",
        "cpf": "517.429.568-07",
        "income": "1000.0",
        "email": "tomas_farias@camarasjc.sp.gov.br",
        "password": "JuIzRXHe1u",
        "zipCode": "04880-033",
        "street": "Travessa Renascer, 806 - Recanto Campo Belo - São Paulo - SP",
    }


@pytest.fixture
def other_customer_payload() -> dict:
    """A second customer with distinct cpf and email."""
    return {
        "firstName": "Ana",
        "lastName": "Souza",
        "cpf": "123.456.789-09",
        "income": "2500.50",
        "email": "ana.souza@example.com",
        "password": "s3cr3t",
        "zipCode": "01001-000",
        "street": "Praça da Sé, 1 - Sé - São Paulo - SP",
    }


@pytest.fixture
def credit_payload_factory(today: date):
    """Build a valid credit request body for a customer."""

    def _build(customer_id: int, **overrides) -> dict:
        payload = {
            "creditValue": "1000.0",
            "dayFirstOfInstallment": add_months(today, 2).isoformat(),
            "numberOfInstallments": 24,
            "customerId": customer_id,
        }
        payload.update(overrides)
        return payload

    return _build
