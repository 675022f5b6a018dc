"""
User database model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime

from foodshare.database import Base


class User(Base):
    """User model. Login is a trust-all picker, the password is stored as given."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    food_preference = Column(String, nullable=True)  # vegetarian, vegan, ...
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
