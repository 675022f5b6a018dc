"""
FoodItem database model.
"""

from sqlalchemy import Column, Integer, String, Date, ForeignKey, Index
from sqlalchemy.orm import relationship

from foodshare.database import Base
from foodshare.models.enums import ItemStatus, db_enum


class FoodItem(Base):
    """A perishable item in a user's fridge."""

    __tablename__ = "food_items"
    __table_args__ = (
        Index("idx_food_item_owner", "user_id"),
        Index("idx_food_item_expiration", "expiration_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    expiration_date = Column(Date, nullable=False)
    status = Column(db_enum(ItemStatus), default=ItemStatus.NORMAL, nullable=False)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)

    # Many-to-one only: deleting an item must not touch claims or alerts
    # that still reference its id.
    owner = relationship("User")
    category = relationship("Category")

    def __repr__(self):
        return f"<FoodItem(id={self.id}, name={self.name}, status={self.status})>"
