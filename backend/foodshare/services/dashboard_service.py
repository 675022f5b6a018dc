"""
Personal dashboard counters.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from foodshare.config import settings
from foodshare.models.claim import Claim
from foodshare.models.food_item import FoodItem
from foodshare.models.friend_group import FriendGroup, GroupMember
from foodshare.models.enums import ItemStatus, MembershipStatus
from foodshare.services.alert_service import days_until_expiration
from foodshare.services.group_service import membership_status

logger = logging.getLogger(__name__)


class DashboardService:
    def get_summary(
        self, db: Session, user_id: int, today: Optional[date] = None
    ) -> Dict[str, Any]:
        """Counts scoped strictly to one user."""
        today = today or date.today()

        my_items = db.query(FoodItem).filter(FoodItem.user_id == user_id).all()
        my_item_ids = [item.id for item in my_items]

        # Unlike the alert list, the dashboard leaves claimed items out.
        active_alerts = sum(
            1
            for item in my_items
            if item.status != ItemStatus.CLAIMED
            and 0 <= days_until_expiration(item.expiration_date, today) <= settings.DISPLAY_ALERT_DAYS
        )

        claims = (
            db.query(Claim)
            .filter(or_(Claim.user_id == user_id, Claim.food_item_id.in_(my_item_ids)))
            .count()
        )

        group_ids = {
            g.id for g in db.query(FriendGroup).filter(FriendGroup.owner_id == user_id)
        }
        for member in db.query(GroupMember).filter(GroupMember.user_id == user_id):
            if membership_status(member) == MembershipStatus.ACCEPTED:
                group_ids.add(member.group_id)

        return {
            "user_id": user_id,
            "food_items": len(my_items),
            "active_alerts": active_alerts,
            "claims": claims,
            "groups": len(group_ids),
        }


dashboard_service = DashboardService()
