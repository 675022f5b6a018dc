"""
Availability ledger model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey

from foodshare.database import Base


class Availability(Base):
    """Record that an item was opted into sharing. Never cleared once created."""

    __tablename__ = "availability"

    id = Column(Integer, primary_key=True, index=True)
    food_item_id = Column(Integer, ForeignKey("food_items.id"), nullable=False, unique=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    available_from = Column(DateTime, default=datetime.utcnow, nullable=False)
