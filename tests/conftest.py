"""
Pytest fixtures for the inventory service test suite.

Every test gets a fresh in-memory SQLite database shared through a
StaticPool, so the API client and the service fixtures see the same rows.
"""
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shared.core.database import Base, get_inventory_db
from inventory_service.app.crud.ledger_store import LedgerStore
from inventory_service.app.main import app
from inventory_service.app.models import BinTransaction, Log, Material  # noqa: F401
from inventory_service.app.services.inventory_service import InventoryService
from inventory_service.app.services.material_locks import MaterialLocks


class TickingClock:
    """Returns a later time on every call, starting this morning."""

    def __init__(self, start: datetime = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime.combine(datetime.now().date(), datetime.min.time()) + timedelta(hours=8)
        self.step = step

    def __call__(self) -> datetime:
        self.current = self.current + self.step
        return self.current


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def clock():
    return TickingClock()


@pytest.fixture()
def store(db):
    return LedgerStore(db)


@pytest.fixture()
def service(store, clock):
    return InventoryService(store, locks=MaterialLocks(), now=clock)


@pytest.fixture()
def seeded(service):
    """The TRIM-001 scenario: 100 units at A1/01, plus two other materials."""
    service.store.create_material("TRIM-001", 100, "A1", "01", service.now())
    service.store.create_material("TRIM-002", 50, "B2", "15", service.now())
    service.store.create_material("BUTTON-X", 500, "C1", "84", service.now())
    service.store.commit()
    return service


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_inventory_db] = override_get_db
    # no context manager: the startup seed and create_all stay out of tests
    yield TestClient(app)
    app.dependency_overrides.clear()
