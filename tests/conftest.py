"""
Shared pytest fixtures.
"""
import os
import sys
from datetime import date, timedelta
from typing import Generator

# Configure before foodshare.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

# Add backend directory to sys.path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../backend"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from foodshare.database import Base, get_db
from foodshare.core.rate_limit import limiter
from foodshare.main import app
from foodshare.models import User, Category, FoodItem, ItemStatus

limiter.enabled = False


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """Create in-memory SQLite database for testing"""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def db_session(test_db):
    """Alias for test_db for clarity"""
    return test_db


@pytest.fixture
def client(test_db) -> Generator[TestClient, None, None]:
    """TestClient bound to the test database (lifespan is not run)."""

    def _get_db():
        yield test_db

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture
def populated_db(test_db, today):
    """Two users, one category and a few items owned by alice"""
    session = test_db

    alice = User(name="Alice", email="alice@example.com", password="pw")
    bob = User(name="Bob", email="bob@example.com", password="pw")
    session.add_all([alice, bob])
    session.flush()

    dairy = Category(name="Dairy")
    session.add(dairy)
    session.flush()

    milk = FoodItem(
        name="Milk",
        quantity=2,
        expiration_date=today + timedelta(days=2),
        status=ItemStatus.NORMAL,
        user_id=alice.id,
        category_id=dairy.id,
    )
    yogurt = FoodItem(
        name="Yogurt",
        quantity=4,
        expiration_date=today + timedelta(days=10),
        status=ItemStatus.NORMAL,
        user_id=alice.id,
        category_id=dairy.id,
    )
    session.add_all([milk, yogurt])
    session.commit()

    return {
        "session": session,
        "alice": alice,
        "bob": bob,
        "category": dairy,
        "milk": milk,
        "yogurt": yogurt,
    }
