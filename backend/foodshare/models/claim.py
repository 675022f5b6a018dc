"""
Claim database model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from foodshare.database import Base
from foodshare.models.enums import ClaimStatus, db_enum


class Claim(Base):
    """A request by a user to take over another user's available item."""

    __tablename__ = "claims"
    __table_args__ = (
        Index("idx_claim_user", "user_id"),
        Index("idx_claim_item", "food_item_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    food_item_id = Column(Integer, ForeignKey("food_items.id"), nullable=False)
    status = Column(db_enum(ClaimStatus), default=ClaimStatus.PENDING, nullable=False)
    claim_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    pickup_location = Column(String, nullable=True)

    claimant = relationship("User")
    food_item = relationship("FoodItem")
