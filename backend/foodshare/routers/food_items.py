"""
API endpoints for food items, including the availability and claim actions
that start from an item.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from foodshare.config import settings
from foodshare.core.rate_limit import limiter
from foodshare.database import get_db
from foodshare.models.enums import ItemStatus
from foodshare.schemas import (
    FoodItemCreate,
    FoodItemUpdate,
    FoodItemResponse,
    MarkAvailableRequest,
    MarkAvailableResponse,
    ClaimItemRequest,
    ClaimResponse,
    MessageResponse,
)
from foodshare.services.item_service import item_service
from foodshare.services.alert_service import alert_service
from foodshare.services.availability_service import availability_service
from foodshare.services.claim_service import claim_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=FoodItemResponse, status_code=status.HTTP_201_CREATED)
def create_food_item(item_in: FoodItemCreate, db: Session = Depends(get_db)):
    item = item_service.create(db, item_in.model_dump())
    alert_service.sync_alert_for_item(db, item)
    return item


@router.get("", response_model=List[FoodItemResponse])
def list_food_items(
    user_id: Optional[int] = Query(None, alias="userId"),
    item_status: Optional[ItemStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    """List food items, optionally one owner's and/or one status."""
    return item_service.list(db, user_id=user_id, status=item_status)


@router.get("/available", response_model=List[FoodItemResponse])
def list_available_items(
    exclude_user_id: Optional[int] = Query(None, alias="excludeUserId"),
    db: Session = Depends(get_db),
):
    """Items offered for sharing, soonest expiring first."""
    return item_service.list_available(db, exclude_user_id=exclude_user_id)


@router.get("/{item_id}", response_model=FoodItemResponse)
def get_food_item(item_id: int, db: Session = Depends(get_db)):
    return item_service.get(db, item_id)


@router.put("/{item_id}", response_model=FoodItemResponse)
def update_food_item(item_id: int, item_in: FoodItemUpdate, db: Session = Depends(get_db)):
    item = item_service.update(db, item_id, item_in.model_dump(exclude_unset=True))
    alert_service.sync_alert_for_item(db, item)
    return item


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_food_item(item_id: int, db: Session = Depends(get_db)):
    item_service.delete(db, item_id)
    return {"message": "Deleted"}


@router.post("/{item_id}/availability", response_model=MarkAvailableResponse)
@limiter.limit(settings.WORKFLOW_RATE_LIMIT)
def mark_item_available(
    request: Request,
    item_id: int,
    response: Response,
    body: Optional[MarkAvailableRequest] = None,
    db: Session = Depends(get_db),
):
    """
    Offer the item for sharing. 201 when the ledger row was created, 200 when
    the item already had one (status is set to 'disponibil' either way).
    """
    owner_id = body.owner_id if body else None
    availability, created = availability_service.mark_available(db, item_id, owner_id)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return MarkAvailableResponse(
        id=availability.id,
        food_item_id=availability.food_item_id,
        owner_id=availability.owner_id,
        available_from=availability.available_from,
        created=created,
        item_status=ItemStatus.AVAILABLE,
    )


@router.post(
    "/{item_id}/claims", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED
)
@limiter.limit(settings.WORKFLOW_RATE_LIMIT)
def claim_food_item(
    request: Request,
    item_id: int,
    claim_in: ClaimItemRequest,
    db: Session = Depends(get_db),
):
    """Claim the item for a user; the item moves to 'claimed'."""
    return claim_service.claim_item(
        db, item_id, claim_in.user_id, pickup_location=claim_in.pickup_location
    )
