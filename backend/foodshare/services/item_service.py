"""
Item store: food items and the read-only views built on them.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from foodshare.models.food_item import FoodItem
from foodshare.models.enums import ItemStatus
from foodshare.services.crud import CRUDService

logger = logging.getLogger(__name__)


class ItemService(CRUDService):
    model = FoodItem
    label = "Food item"

    def list(
        self,
        db: Session,
        user_id: Optional[int] = None,
        status: Optional[ItemStatus] = None,
    ) -> List[FoodItem]:
        """List items, optionally only one owner's or one status."""
        query = db.query(FoodItem)
        if user_id is not None:
            query = query.filter(FoodItem.user_id == user_id)
        if status is not None:
            query = query.filter(FoodItem.status == status)
        return query.order_by(FoodItem.id).all()

    def list_available(
        self, db: Session, exclude_user_id: Optional[int] = None
    ) -> List[FoodItem]:
        """Items currently offered for sharing, optionally hiding the viewer's own."""
        query = db.query(FoodItem).filter(FoodItem.status == ItemStatus.AVAILABLE)
        if exclude_user_id is not None:
            query = query.filter(FoodItem.user_id != exclude_user_id)
        return query.order_by(FoodItem.expiration_date.asc()).all()

    def list_expiring(
        self, db: Session, days: int, today: Optional[date] = None
    ) -> List[FoodItem]:
        """Items whose expiration date falls between today and today + days."""
        today = today or date.today()
        limit_date = today + timedelta(days=days)
        return (
            db.query(FoodItem)
            .filter(FoodItem.expiration_date.between(today, limit_date))
            .order_by(FoodItem.expiration_date.asc())
            .all()
        )


item_service = ItemService()
