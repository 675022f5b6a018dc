"""
API endpoints for group memberships and invitation answers.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.schemas import (
    GroupMemberCreate,
    GroupMemberUpdate,
    GroupMemberResponse,
    MessageResponse,
)
from foodshare.services.group_service import group_member_service

router = APIRouter()


@router.post("", response_model=GroupMemberResponse, status_code=status.HTTP_201_CREATED)
def create_group_member(member_in: GroupMemberCreate, db: Session = Depends(get_db)):
    """Raw association. Without Status the row counts as an accepted member."""
    return group_member_service.create(db, member_in.model_dump())


@router.get("", response_model=List[GroupMemberResponse])
def list_group_members(db: Session = Depends(get_db)):
    return group_member_service.list(db)


@router.get("/byGroup/{group_id}", response_model=List[GroupMemberResponse])
def list_members_by_group(group_id: int, db: Session = Depends(get_db)):
    return group_member_service.by_group(db, group_id)


@router.get("/byUser/{user_id}", response_model=List[GroupMemberResponse])
def list_members_by_user(user_id: int, db: Session = Depends(get_db)):
    return group_member_service.by_user(db, user_id)


@router.put("/{member_id}", response_model=GroupMemberResponse)
def update_group_member(
    member_id: int, member_in: GroupMemberUpdate, db: Session = Depends(get_db)
):
    return group_member_service.update(db, member_id, member_in.model_dump(exclude_unset=True))


@router.delete("/{member_id}", response_model=MessageResponse)
def delete_group_member(member_id: int, db: Session = Depends(get_db)):
    group_member_service.delete(db, member_id)
    return {"message": "Deleted"}


@router.post("/{member_id}/accept", response_model=GroupMemberResponse)
def accept_invitation(member_id: int, db: Session = Depends(get_db)):
    return group_member_service.accept_invitation(db, member_id)


@router.post("/{member_id}/decline", response_model=GroupMemberResponse)
def decline_invitation(member_id: int, db: Session = Depends(get_db)):
    return group_member_service.decline_invitation(db, member_id)
