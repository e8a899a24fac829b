"""Shared fixtures for the popup tree select tests."""

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.ids import IdAllocator
from db.base import Base
import db.node  # noqa: F401

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def sample_data():
    """The example tree from the widget documentation, as mappings."""
    return {
        "label": "Root",
        "value": 0,
        "children": [
            {"label": "A", "value": 1},
            {"label": "B", "value": 2, "children": [{"label": "C", "value": 3}]},
        ],
    }


@pytest.fixture
def ids():
    return IdAllocator()


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    s = Session()
    try:
        yield s
    finally:
        s.close()
        engine.dispose()


@pytest.fixture
def client(session, monkeypatch):
    from db.session import get_db
    from main import app

    monkeypatch.delenv("AUTH_ENABLED", raising=False)

    def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
