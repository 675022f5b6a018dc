"""
Category database model.
"""

from sqlalchemy import Column, Integer, String

from foodshare.database import Base


class Category(Base):
    """Category model, static reference data for food items."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
