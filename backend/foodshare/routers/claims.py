"""
API endpoints for claims and the owner's accept / decline decision.
"""

from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from foodshare.config import settings
from foodshare.core.rate_limit import limiter
from foodshare.database import get_db
from foodshare.schemas import (
    ClaimCreate,
    ClaimUpdate,
    ClaimResponse,
    ClaimAcceptResponse,
    UserClaimsResponse,
    MessageResponse,
)
from foodshare.services.claim_service import claim_service

router = APIRouter()


@router.post("", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED)
def create_claim(claim_in: ClaimCreate, db: Session = Depends(get_db)):
    """Raw claim record. Use POST /api/fooditems/{id}/claims to claim an item."""
    return claim_service.create(db, claim_in.model_dump())


@router.get("", response_model=List[ClaimResponse])
def list_claims(db: Session = Depends(get_db)):
    return claim_service.list(db)


@router.get("/byUser/{user_id}", response_model=UserClaimsResponse)
def list_user_claims(user_id: int, db: Session = Depends(get_db)):
    """Claims the user made and claims on the user's items."""
    return {
        "my_claims": claim_service.claims_made_by(db, user_id),
        "claims_on_my_items": claim_service.claims_on_items_of(db, user_id),
    }


@router.get("/{claim_id}", response_model=ClaimResponse)
def get_claim(claim_id: int, db: Session = Depends(get_db)):
    return claim_service.get(db, claim_id)


@router.put("/{claim_id}", response_model=ClaimResponse)
def update_claim(claim_id: int, claim_in: ClaimUpdate, db: Session = Depends(get_db)):
    return claim_service.update(db, claim_id, claim_in.model_dump(exclude_unset=True))


@router.delete("/{claim_id}", response_model=MessageResponse)
def delete_claim(claim_id: int, db: Session = Depends(get_db)):
    claim_service.delete(db, claim_id)
    return {"message": "Deleted"}


@router.post("/{claim_id}/accept", response_model=ClaimAcceptResponse)
@limiter.limit(settings.WORKFLOW_RATE_LIMIT)
def accept_claim(request: Request, claim_id: int, db: Session = Depends(get_db)):
    """
    Accept a pending claim: the item is recreated for the claimant and the
    original deleted. 409 if the claim was already resolved.
    """
    claim, transferred = claim_service.accept_claim(db, claim_id)
    return {"claim": claim, "transferred_item": transferred}


@router.post("/{claim_id}/decline", response_model=ClaimResponse)
@limiter.limit(settings.WORKFLOW_RATE_LIMIT)
def decline_claim(request: Request, claim_id: int, db: Session = Depends(get_db)):
    """Reject a pending claim. The item keeps its 'claimed' status."""
    return claim_service.decline_claim(db, claim_id)
