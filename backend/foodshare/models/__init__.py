"""
Database models for the FoodShare API.

All SQLAlchemy models are imported here so Base.metadata knows every table.
"""

from foodshare.models.user import User
from foodshare.models.category import Category
from foodshare.models.food_item import FoodItem
from foodshare.models.availability import Availability
from foodshare.models.expiration_alert import ExpirationAlert
from foodshare.models.claim import Claim
from foodshare.models.friend_group import FriendGroup, GroupMember
from foodshare.models.social_post import SocialPost
from foodshare.models.enums import (
    ItemStatus,
    ClaimStatus,
    AlertStatus,
    MembershipStatus,
    MemberRole,
)

__all__ = [
    "User",
    "Category",
    "FoodItem",
    "Availability",
    "ExpirationAlert",
    "Claim",
    "FriendGroup",
    "GroupMember",
    "SocialPost",
    "ItemStatus",
    "ClaimStatus",
    "AlertStatus",
    "MembershipStatus",
    "MemberRole",
]
