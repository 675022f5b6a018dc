"""
API endpoints for friend groups.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.schemas import (
    FriendGroupCreate,
    FriendGroupResponse,
    GroupOverviewResponse,
    GroupDetailsResponse,
    GroupInviteRequest,
    GroupMemberResponse,
)
from foodshare.services.group_service import (
    friend_group_service,
    group_member_service,
    GroupView,
)

router = APIRouter()


def _view(view: GroupView) -> dict:
    group = view.group
    return {
        "id": group.id,
        "name": group.name,
        "owner_id": group.owner_id,
        "description": group.description,
        "created_at": group.created_at,
        "member_count": view.member_count,
        "is_owner": view.is_owner,
        "member_id": view.member_id,
    }


@router.post("", response_model=FriendGroupResponse, status_code=status.HTTP_201_CREATED)
def create_group(group_in: FriendGroupCreate, db: Session = Depends(get_db)):
    """Create a group and send invitations to InviteUserIds."""
    return friend_group_service.create_group(
        db,
        name=group_in.name,
        owner_id=group_in.owner_id,
        description=group_in.description,
        invite_user_ids=group_in.invite_user_ids,
    )


@router.get("", response_model=List[FriendGroupResponse])
def list_groups(db: Session = Depends(get_db)):
    return friend_group_service.list(db)


@router.get("/byUser/{user_id}", response_model=GroupOverviewResponse)
def group_overview(user_id: int, db: Session = Depends(get_db)):
    """The user's groups, pending invitations and groups to explore."""
    overview = friend_group_service.overview_for(db, user_id)
    return {
        "my_groups": [_view(v) for v in overview.my_groups],
        "invitations": [_view(v) for v in overview.invitations],
        "explore": [_view(v) for v in overview.explore],
    }


@router.get("/{group_id}/details", response_model=GroupDetailsResponse)
def group_details(group_id: int, db: Session = Depends(get_db)):
    details = friend_group_service.group_details(db, group_id)
    return {
        "group": details.group,
        "members": details.members,
        "food_items": details.food_items,
    }


@router.post(
    "/{group_id}/invitations",
    response_model=GroupMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
def invite_member(group_id: int, invite_in: GroupInviteRequest, db: Session = Depends(get_db)):
    """Invite a user, or re-invite one who declined."""
    return group_member_service.invite(db, group_id, invite_in.user_id)
