"""
ExpirationAlert database model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey

from foodshare.database import Base
from foodshare.models.enums import AlertStatus, db_enum


class ExpirationAlert(Base):
    """Persisted alert raised for an item, used for audit, not for display."""

    __tablename__ = "expiration_alerts"

    id = Column(Integer, primary_key=True, index=True)
    food_item_id = Column(Integer, ForeignKey("food_items.id"), nullable=False, index=True)
    alert_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    status = Column(db_enum(AlertStatus), default=AlertStatus.UNREAD, nullable=False)
