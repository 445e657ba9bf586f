"""
Pytest fixtures: an in-memory SQLite store with seeded pet types and a
TestClient bound to it.
"""
import os

# Keep the default engine off any real server while modules import settings.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.pool import StaticPool

from petrecords.db.gateway import Gateway
from petrecords.db.init_db import init_db
from petrecords.db.session import build_engine
from petrecords.main import create_app
from petrecords.scripts.seed_data import seed_pet_types

PET_TYPES = ["Dog", "Cat", "Rabbit"]


def make_engine():
    return build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    engine = make_engine()
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def gateway(engine):
    """Gateway over a fresh schema with Dog=1, Cat=2, Rabbit=3."""
    gw = Gateway(engine)
    seed_pet_types(gw, PET_TYPES)
    return gw


@pytest.fixture
def bare_gateway():
    """Gateway over an engine with no tables at all."""
    engine = make_engine()
    yield Gateway(engine)
    engine.dispose()


@pytest.fixture
def client(gateway):
    app = create_app(gateway=gateway, create_tables=False)
    return TestClient(app)


@pytest.fixture
def broken_client(bare_gateway):
    """Client whose store has no tables, so every query fails."""
    app = create_app(gateway=bare_gateway, create_tables=False)
    return TestClient(app)


@pytest.fixture
def count_rows(gateway):
    def _count(model) -> int:
        return gateway.fetch_one(select(func.count().label("n")).select_from(model))["n"]

    return _count
