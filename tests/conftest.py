"""
Shared pytest fixtures.

DATABASE_URL is pointed at an in-memory SQLite database before the
application is imported; the schema is created and dropped around every test.
"""

import os

os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite://")

from decimal import Decimal
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.database import Base, SessionLocal, engine
from app.crud import tenant as tenant_crud
from app.models.product import Product
from app.models.tenant import Tenant
from main import app
from tests.utils import MAIN_HOST

@pytest.fixture(autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client_for() -> Generator[Callable[..., TestClient], None, None]:
    """Factory for test clients whose requests carry the given Host."""
    clients = []

    def _client(host: str = MAIN_HOST, **kwargs) -> TestClient:
        client = TestClient(app, base_url=f"http://{host}", **kwargs)
        clients.append(client)
        return client

    yield _client

    for client in clients:
        client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_for) -> TestClient:
    """Client on the main domain."""
    return client_for(MAIN_HOST)


@pytest.fixture
def make_tenant(db_session: Session) -> Callable[..., Tenant]:
    def _make(subdomain: str, name: str = None, primary_color: str = "#112233") -> Tenant:
        return tenant_crud.create(
            db_session,
            name=name or subdomain.title(),
            subdomain=subdomain,
            primary_color=primary_color,
        )

    return _make


@pytest.fixture
def make_product(db_session: Session) -> Callable[..., Product]:
    def _make(tenant: Tenant, name: str = "Widget", price: str = "9.99", is_active: bool = True) -> Product:
        product = Product(
            tenant_id=tenant.id,
            name=name,
            price=Decimal(price),
            is_active=is_active,
        )
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product

    return _make
