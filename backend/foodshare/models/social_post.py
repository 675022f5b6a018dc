"""
SocialPost database model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from foodshare.database import Base


class SocialPost(Base):
    """A post to the social feed, optionally about a food item."""

    __tablename__ = "social_posts"

    id = Column(Integer, primary_key=True, index=True)
    platform = Column(String, nullable=False)
    message = Column(String, nullable=False)
    post_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    status = Column(String, default="posted", nullable=False)
    food_item_id = Column(Integer, ForeignKey("food_items.id"), nullable=True, index=True)
