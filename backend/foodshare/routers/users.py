"""
API endpoints for users.

There is no authentication: the front end offers a user picker and every
request simply names the acting user.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.schemas import (
    UserCreate,
    UserUpdate,
    UserResponse,
    DashboardResponse,
    MessageResponse,
)
from foodshare.services.user_service import user_service
from foodshare.services.dashboard_service import dashboard_service

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)):
    return user_service.create(db, user_in.model_dump())


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return user_service.list(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get(db, user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_in: UserUpdate, db: Session = Depends(get_db)):
    return user_service.update(db, user_id, user_in.model_dump(exclude_unset=True))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service.delete(db, user_id)
    return {"message": "Deleted"}


@router.get("/{user_id}/dashboard", response_model=DashboardResponse)
def get_dashboard(user_id: int, db: Session = Depends(get_db)):
    """Personal counters: items, active alerts, claims and groups."""
    user_service.get(db, user_id)
    return dashboard_service.get_summary(db, user_id)
