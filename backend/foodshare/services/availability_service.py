"""
Availability ledger.

An Availability row says "this item was opted into sharing at some point".
Rows are unique per item and never removed, even after the item is claimed
or transferred; FoodItem.status is what carries the current state.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodshare.core.errors import NotFoundError
from foodshare.models.availability import Availability
from foodshare.models.food_item import FoodItem
from foodshare.models.enums import ItemStatus
from foodshare.services.crud import CRUDService

logger = logging.getLogger(__name__)


class AvailabilityService(CRUDService):
    model = Availability
    label = "Availability"
    conflict_message = "Item is already marked as available"

    def find_for_item(self, db: Session, item_id: int) -> Optional[Availability]:
        return db.query(Availability).filter(Availability.food_item_id == item_id).first()

    def mark_available(
        self, db: Session, item_id: int, owner_id: Optional[int] = None
    ) -> Tuple[Availability, bool]:
        """
        Offer an item for sharing.

        Creates the ledger row if the item has none yet, then forces the item
        status to 'disponibil'. When another writer inserted the row first the
        unique index on food_item_id rejects ours and the existing row is
        reused. Returns (availability, created).
        """
        item = db.get(FoodItem, item_id)
        if item is None:
            raise NotFoundError("Food item", item_id)
        if owner_id is None:
            owner_id = item.user_id

        availability = self.find_for_item(db, item_id)
        created = False
        if availability is None:
            availability = Availability(
                food_item_id=item_id,
                owner_id=owner_id,
                available_from=datetime.utcnow(),
            )
            db.add(availability)
            try:
                db.flush()
                created = True
            except IntegrityError:
                # Lost the race: the row exists now, keep going with it.
                db.rollback()
                logger.info(f"Availability for item {item_id} created concurrently")
                availability = self.find_for_item(db, item_id)
                item = db.get(FoodItem, item_id)

        item.status = ItemStatus.AVAILABLE
        db.commit()
        db.refresh(availability)
        db.refresh(item)

        if created:
            logger.info(f"Item {item_id} marked available by user {owner_id}")
        else:
            logger.info(f"Item {item_id} was already available, status refreshed")
        return availability, created


availability_service = AvailabilityService()
