"""
Claim workflow.

A claim moves pending -> accepted or pending -> rejected, nothing else.
Accepting transfers the item to the claimant by recreating it under the new
owner and deleting the original, so the transferred item gets a new id and
alerts or older claims that pointed at the old id are left dangling.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from foodshare.core.errors import NotFoundError, ConflictError
from foodshare.models.claim import Claim
from foodshare.models.food_item import FoodItem
from foodshare.models.enums import ClaimStatus, ItemStatus
from foodshare.services.crud import CRUDService

logger = logging.getLogger(__name__)


class ClaimService(CRUDService):
    model = Claim
    label = "Claim"

    def claim_item(
        self,
        db: Session,
        item_id: int,
        user_id: int,
        pickup_location: Optional[str] = None,
    ) -> Claim:
        """
        Record a pending claim on an item and mark the item as claimed.

        The item is expected to be 'disponibil' but this is not checked, and
        nothing stops several claims on the same item.
        """
        item = db.get(FoodItem, item_id)
        if item is None:
            raise NotFoundError("Food item", item_id)

        claim = Claim(
            user_id=user_id,
            food_item_id=item_id,
            status=ClaimStatus.PENDING,
            claim_date=datetime.utcnow(),
            pickup_location=pickup_location,
        )
        db.add(claim)
        item.status = ItemStatus.CLAIMED
        db.commit()
        db.refresh(claim)

        logger.info(f"User {user_id} claimed item {item_id} (claim {claim.id})")
        return claim

    def accept_claim(self, db: Session, claim_id: int) -> Tuple[Claim, FoodItem]:
        """
        Accept a pending claim and hand the item over to the claimant.

        Runs as one transaction: resolve the claim, copy the item for the
        claimant with status 'normal', delete the original. A second accept
        on the same claim raises ConflictError instead of creating another
        copy.
        """
        claim = self._resolve(db, claim_id, ClaimStatus.ACCEPTED)

        try:
            original = db.get(FoodItem, claim.food_item_id)
            if original is None:
                raise NotFoundError("Food item", claim.food_item_id)

            transferred = FoodItem(
                name=original.name,
                quantity=original.quantity,
                expiration_date=original.expiration_date,
                category_id=original.category_id,
                user_id=claim.user_id,
                status=ItemStatus.NORMAL,
            )
            db.add(transferred)
            db.delete(original)
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(claim)
        db.refresh(transferred)
        logger.info(
            f"Claim {claim_id} accepted: item {claim.food_item_id} transferred "
            f"to user {claim.user_id} as item {transferred.id}"
        )
        return claim, transferred

    def decline_claim(self, db: Session, claim_id: int) -> Claim:
        """Reject a pending claim. The item stays 'claimed'."""
        claim = self._resolve(db, claim_id, ClaimStatus.REJECTED)
        db.commit()
        db.refresh(claim)
        logger.info(f"Claim {claim_id} declined")
        return claim

    def update(self, db: Session, claim_id: int, data) -> Claim:
        """
        Record-level update. A status change goes through accept / decline,
        so a resolved claim can never be moved again (ConflictError).
        """
        data = dict(data)
        new_status = data.pop("status", None)
        claim = self.get(db, claim_id)

        if new_status is not None and new_status != claim.status:
            if claim.status != ClaimStatus.PENDING:
                raise ConflictError(f"Claim is already {claim.status.value}")
            if new_status == ClaimStatus.ACCEPTED:
                claim, _ = self.accept_claim(db, claim_id)
            elif new_status == ClaimStatus.REJECTED:
                claim = self.decline_claim(db, claim_id)

        if data:
            claim = super().update(db, claim_id, data)
        return claim

    def claims_made_by(self, db: Session, user_id: int) -> List[Claim]:
        return (
            db.query(Claim)
            .filter(Claim.user_id == user_id)
            .order_by(Claim.claim_date.desc())
            .all()
        )

    def claims_on_items_of(self, db: Session, owner_id: int) -> List[Claim]:
        """Claims on items the user currently owns."""
        return (
            db.query(Claim)
            .join(FoodItem, Claim.food_item_id == FoodItem.id)
            .filter(FoodItem.user_id == owner_id)
            .order_by(Claim.claim_date.desc())
            .all()
        )

    def _resolve(self, db: Session, claim_id: int, new_status: ClaimStatus) -> Claim:
        """
        Move a claim out of 'pending' with a conditional update.

        Only one caller can win the pending -> resolved transition; everyone
        else sees zero updated rows and gets a ConflictError. The change is
        flushed but not committed.
        """
        updated = (
            db.query(Claim)
            .filter(Claim.id == claim_id, Claim.status == ClaimStatus.PENDING)
            .update({Claim.status: new_status}, synchronize_session=False)
        )
        if not updated:
            claim = db.get(Claim, claim_id)
            if claim is None:
                raise NotFoundError("Claim", claim_id)
            db.refresh(claim)
            raise ConflictError(f"Claim is already {claim.status.value}")

        claim = db.get(Claim, claim_id)
        db.refresh(claim)
        return claim


claim_service = ClaimService()
