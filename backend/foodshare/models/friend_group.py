"""
FriendGroup and GroupMember database models.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from foodshare.database import Base
from foodshare.models.enums import MembershipStatus, MemberRole, db_enum


class FriendGroup(Base):
    """A group of users sharing food. The owner is implicitly a member."""

    __tablename__ = "friend_groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    members = relationship(
        "GroupMember", back_populates="group", cascade="all, delete-orphan"
    )


class GroupMember(Base):
    """Association of a user with a group.

    status is NULL for associations created before invitations existed;
    those are read as accepted members.
    """

    __tablename__ = "group_members"
    __table_args__ = (
        Index("idx_member_group_user", "group_id", "user_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("friend_groups.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    food_tag = Column(String, nullable=True)  # vegetarian, carnivore, ...
    status = Column(db_enum(MembershipStatus), nullable=True)
    role = Column(db_enum(MemberRole), nullable=True)

    group = relationship("FriendGroup", back_populates="members")
