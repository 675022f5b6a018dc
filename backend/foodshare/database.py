"""
Database configuration and session management for the FoodShare API.

Uses SQLAlchemy ORM. SQLite foreign key enforcement is left off: the
relations between items, users and categories are advisory.
"""

import os
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from foodshare.config import settings

# Create database directory if it doesn't exist
db_dir = os.path.dirname(settings.DATABASE_URL.replace("sqlite:///", ""))
if settings.DATABASE_URL.startswith("sqlite") and db_dir and not os.path.exists(db_dir):
    os.makedirs(db_dir, exist_ok=True)

# Create SQLAlchemy engine
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    connect_args=connect_args,
)

# Base class for declarative models
Base = declarative_base()

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """
    Initialize database by creating all tables.
    """
    # Import models to ensure they're registered
    from foodshare import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db() -> Session:
    """
    Dependency for getting database session.
    Use in FastAPI route dependencies.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context():
    """
    Context manager for database session.
    Use for non-FastAPI contexts (background tasks, scripts).
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
