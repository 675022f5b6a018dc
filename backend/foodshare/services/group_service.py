"""
Friend groups and the membership lifecycle.

Invitation state is stored on the GroupMember row. Reading a membership
applies the precedence declined > invited > accepted, and a row without any
status is an older association that is treated as an accepted member.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from foodshare.core.errors import NotFoundError, ConflictError
from foodshare.models.food_item import FoodItem
from foodshare.models.friend_group import FriendGroup, GroupMember
from foodshare.models.user import User
from foodshare.models.enums import ItemStatus, MembershipStatus, MemberRole
from foodshare.services.crud import CRUDService

logger = logging.getLogger(__name__)


@dataclass
class GroupView:
    group: FriendGroup
    member_count: int
    is_owner: bool
    member_id: Optional[int] = None


@dataclass
class GroupOverview:
    my_groups: List[GroupView] = field(default_factory=list)
    invitations: List[GroupView] = field(default_factory=list)
    explore: List[GroupView] = field(default_factory=list)


@dataclass
class GroupDetails:
    group: FriendGroup
    members: List[dict]
    food_items: List[FoodItem]


def membership_status(member: GroupMember) -> MembershipStatus:
    if member.status == MembershipStatus.DECLINED:
        return MembershipStatus.DECLINED
    if member.status == MembershipStatus.INVITED:
        return MembershipStatus.INVITED
    # accepted, or a legacy row with no status
    return MembershipStatus.ACCEPTED


def accepted_member_ids(group: FriendGroup, members: Iterable[GroupMember]) -> set:
    """Owner plus every accepted member of the group."""
    ids = {group.owner_id}
    for member in members:
        if member.group_id == group.id and membership_status(member) == MembershipStatus.ACCEPTED:
            ids.add(member.user_id)
    return ids


def classify_groups(
    groups: Iterable[FriendGroup], members: Iterable[GroupMember], viewer_id: int
) -> GroupOverview:
    """
    Sort groups into the viewer's three sections.

    owner -> my groups; invited -> invitations; accepted or legacy -> my
    groups; declined or no association -> explore.
    """
    members = list(members)
    by_group: Dict[int, List[GroupMember]] = {}
    for member in members:
        by_group.setdefault(member.group_id, []).append(member)

    overview = GroupOverview()
    for group in groups:
        group_members = by_group.get(group.id, [])
        is_owner = group.owner_id == viewer_id
        view = GroupView(
            group=group,
            member_count=len(accepted_member_ids(group, group_members)),
            is_owner=is_owner,
        )

        if is_owner:
            overview.my_groups.append(view)
            continue

        own = [m for m in group_members if m.user_id == viewer_id]
        if not own:
            overview.explore.append(view)
            continue

        # Several rows for the same pair resolve with the same precedence.
        statuses = {membership_status(m): m for m in own}
        if MembershipStatus.DECLINED in statuses:
            overview.explore.append(view)
        elif MembershipStatus.INVITED in statuses:
            view.member_id = statuses[MembershipStatus.INVITED].id
            overview.invitations.append(view)
        else:
            view.member_id = statuses[MembershipStatus.ACCEPTED].id
            overview.my_groups.append(view)
    return overview


class FriendGroupService(CRUDService):
    model = FriendGroup
    label = "Friend group"

    def create_group(
        self,
        db: Session,
        name: str,
        owner_id: int,
        description: Optional[str] = None,
        invite_user_ids: Iterable[int] = (),
    ) -> FriendGroup:
        """Create a group and invite the given users in one transaction."""
        group = FriendGroup(name=name, owner_id=owner_id, description=description)
        db.add(group)
        db.flush()

        invited = 0
        for user_id in dict.fromkeys(invite_user_ids):
            if user_id == owner_id:
                continue
            db.add(
                GroupMember(
                    group_id=group.id,
                    user_id=user_id,
                    status=MembershipStatus.INVITED,
                    role=MemberRole.INVITED,
                )
            )
            invited += 1

        db.commit()
        db.refresh(group)
        logger.info(f"Group {group.id} created by user {owner_id}, {invited} invitation(s)")
        return group

    def overview_for(self, db: Session, viewer_id: int) -> GroupOverview:
        groups = db.query(FriendGroup).order_by(FriendGroup.id).all()
        members = db.query(GroupMember).all()
        return classify_groups(groups, members, viewer_id)

    def group_details(self, db: Session, group_id: int) -> GroupDetails:
        """Accepted members (owner included) and the items they offer."""
        group = self.get(db, group_id)
        members = db.query(GroupMember).filter(GroupMember.group_id == group_id).all()
        member_ids = accepted_member_ids(group, members)
        tags = {m.user_id: m.food_tag for m in members}

        users = db.query(User).filter(User.id.in_(member_ids)).all()
        user_names = {u.id: u.name for u in users}
        details = [
            {
                "user_id": user_id,
                "user_name": user_names.get(user_id, f"User {user_id}"),
                "food_tag": tags.get(user_id),
                "is_owner": user_id == group.owner_id,
            }
            for user_id in sorted(member_ids)
        ]

        items = (
            db.query(FoodItem)
            .filter(
                FoodItem.status == ItemStatus.AVAILABLE,
                FoodItem.user_id.in_(member_ids),
            )
            .order_by(FoodItem.expiration_date.asc())
            .all()
        )
        return GroupDetails(group=group, members=details, food_items=items)


class GroupMemberService(CRUDService):
    model = GroupMember
    label = "Group member"

    def by_group(self, db: Session, group_id: int) -> List[GroupMember]:
        return db.query(GroupMember).filter(GroupMember.group_id == group_id).all()

    def by_user(self, db: Session, user_id: int) -> List[GroupMember]:
        return db.query(GroupMember).filter(GroupMember.user_id == user_id).all()

    def invite(self, db: Session, group_id: int, user_id: int) -> GroupMember:
        """Invite a user, or re-invite one who declined earlier."""
        group = db.get(FriendGroup, group_id)
        if group is None:
            raise NotFoundError("Friend group", group_id)
        if group.owner_id == user_id:
            raise ConflictError("The owner is already a member of the group")

        existing = (
            db.query(GroupMember)
            .filter(GroupMember.group_id == group_id, GroupMember.user_id == user_id)
            .first()
        )
        if existing is not None:
            current = membership_status(existing)
            if current != MembershipStatus.DECLINED:
                raise ConflictError(f"User is already {current.value}")
            member = existing
        else:
            member = GroupMember(group_id=group_id, user_id=user_id)
            db.add(member)

        member.status = MembershipStatus.INVITED
        member.role = MemberRole.INVITED
        db.commit()
        db.refresh(member)
        logger.info(f"User {user_id} invited to group {group_id}")
        return member

    def accept_invitation(self, db: Session, member_id: int) -> GroupMember:
        return self._answer(db, member_id, MembershipStatus.ACCEPTED, MemberRole.MEMBER)

    def decline_invitation(self, db: Session, member_id: int) -> GroupMember:
        return self._answer(db, member_id, MembershipStatus.DECLINED, MemberRole.INVITED)

    def _answer(
        self,
        db: Session,
        member_id: int,
        status: MembershipStatus,
        role: MemberRole,
    ) -> GroupMember:
        member = self.get(db, member_id)
        if membership_status(member) != MembershipStatus.INVITED:
            raise ConflictError("Invitation is not pending")
        member.status = status
        member.role = role
        db.commit()
        db.refresh(member)
        logger.info(
            f"User {member.user_id} {status.value} invitation to group {member.group_id}"
        )
        return member


friend_group_service = FriendGroupService()
group_member_service = GroupMemberService()
