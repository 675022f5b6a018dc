"""
API endpoints for the availability ledger.

Records are normally created through POST /api/fooditems/{id}/availability;
the plain CRUD routes remain for tooling and the web front end.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.schemas import (
    AvailabilityCreate,
    AvailabilityUpdate,
    AvailabilityResponse,
    MessageResponse,
)
from foodshare.services.availability_service import availability_service

router = APIRouter()


@router.post("", response_model=AvailabilityResponse, status_code=status.HTTP_201_CREATED)
def create_availability(entry: AvailabilityCreate, db: Session = Depends(get_db)):
    return availability_service.create(db, entry.model_dump())


@router.get("", response_model=List[AvailabilityResponse])
def list_availability(db: Session = Depends(get_db)):
    return availability_service.list(db)


@router.get("/{availability_id}", response_model=AvailabilityResponse)
def get_availability(availability_id: int, db: Session = Depends(get_db)):
    return availability_service.get(db, availability_id)


@router.put("/{availability_id}", response_model=AvailabilityResponse)
def update_availability(
    availability_id: int, entry: AvailabilityUpdate, db: Session = Depends(get_db)
):
    return availability_service.update(
        db, availability_id, entry.model_dump(exclude_unset=True)
    )


@router.delete("/{availability_id}", response_model=MessageResponse)
def delete_availability(availability_id: int, db: Session = Depends(get_db)):
    availability_service.delete(db, availability_id)
    return {"message": "Deleted"}
