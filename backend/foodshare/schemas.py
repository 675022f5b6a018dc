"""
Wire schemas.

The API speaks the capitalized field names of the web front end
(FoodItemId, ExpirationDate, ...). Python code only ever sees the snake_case
attribute names; the aliases declared here are the single place where the two
conventions meet.
"""

from typing import ClassVar, List, Optional
from datetime import datetime, date
from pydantic import BaseModel, Field, EmailStr, ValidationInfo, field_validator

from foodshare.models.enums import (
    ItemStatus,
    ClaimStatus,
    AlertStatus,
    MembershipStatus,
    MemberRole,
)


class WireModel(BaseModel):
    class Config:
        populate_by_name = True
        from_attributes = True


class PartialUpdate(WireModel):
    """
    Update body where every field may be omitted. Fields listed in
    non_nullable map to NOT NULL columns and reject an explicit null.
    """

    non_nullable: ClassVar[tuple] = ()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name in cls.non_nullable:
            raise ValueError(f"{info.field_name} may not be null")
        return value


class MessageResponse(BaseModel):
    message: str


# --- User ---
class UserBase(WireModel):
    name: str = Field(..., alias="UserName", min_length=1, max_length=100)
    email: EmailStr = Field(..., alias="UserEmail")
    food_preference: Optional[str] = Field(None, alias="FoodPreference")


class UserCreate(UserBase):
    password: str = Field(..., alias="UserPassword", min_length=1)


class UserUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple] = ("name", "email", "password")

    name: Optional[str] = Field(None, alias="UserName", min_length=1, max_length=100)
    email: Optional[EmailStr] = Field(None, alias="UserEmail")
    password: Optional[str] = Field(None, alias="UserPassword", min_length=1)
    food_preference: Optional[str] = Field(None, alias="FoodPreference")


class UserResponse(UserBase):
    id: int = Field(..., alias="UserId")
    created_at: datetime = Field(..., alias="CreatedAt")


class DashboardResponse(WireModel):
    user_id: int = Field(..., alias="UserId")
    food_items: int = Field(..., alias="FoodItems")
    active_alerts: int = Field(..., alias="ActiveAlerts")
    claims: int = Field(..., alias="Claims")
    groups: int = Field(..., alias="Groups")


# --- Category ---
class CategoryCreate(WireModel):
    name: str = Field(..., alias="CategoryName", min_length=1, max_length=100)


class CategoryUpdate(CategoryCreate):
    pass


class CategoryResponse(CategoryCreate):
    id: int = Field(..., alias="CategoryId")


# --- Food item ---
class FoodItemBase(WireModel):
    name: str = Field(..., alias="FoodName", min_length=1, max_length=200)
    quantity: int = Field(..., alias="Quantity", gt=0)
    expiration_date: date = Field(..., alias="ExpirationDate")
    status: ItemStatus = Field(ItemStatus.NORMAL, alias="Status")
    user_id: int = Field(..., alias="UserId")
    category_id: int = Field(..., alias="CategoryId")


class FoodItemCreate(FoodItemBase):
    pass


class FoodItemUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple] = (
        "name",
        "quantity",
        "expiration_date",
        "status",
        "user_id",
        "category_id",
    )

    name: Optional[str] = Field(None, alias="FoodName", min_length=1, max_length=200)
    quantity: Optional[int] = Field(None, alias="Quantity", gt=0)
    expiration_date: Optional[date] = Field(None, alias="ExpirationDate")
    status: Optional[ItemStatus] = Field(None, alias="Status")
    user_id: Optional[int] = Field(None, alias="UserId")
    category_id: Optional[int] = Field(None, alias="CategoryId")


class FoodItemResponse(FoodItemBase):
    id: int = Field(..., alias="FoodItemId")


# --- Availability ---
class AvailabilityCreate(WireModel):
    food_item_id: int = Field(..., alias="FoodItemId")
    owner_id: int = Field(..., alias="OwnerId")
    available_from: Optional[datetime] = Field(None, alias="AvailableFrom")


class AvailabilityUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple] = ("owner_id", "available_from")

    owner_id: Optional[int] = Field(None, alias="OwnerId")
    available_from: Optional[datetime] = Field(None, alias="AvailableFrom")


class AvailabilityResponse(WireModel):
    id: int = Field(..., alias="AvailabilityId")
    food_item_id: int = Field(..., alias="FoodItemId")
    owner_id: int = Field(..., alias="OwnerId")
    available_from: datetime = Field(..., alias="AvailableFrom")


class MarkAvailableRequest(WireModel):
    owner_id: Optional[int] = Field(None, alias="OwnerId")


class MarkAvailableResponse(AvailabilityResponse):
    created: bool = Field(..., alias="Created")
    item_status: ItemStatus = Field(..., alias="Status")


# --- Claim ---
class ClaimCreate(WireModel):
    user_id: int = Field(..., alias="UserId")
    food_item_id: int = Field(..., alias="FoodItemId")
    status: ClaimStatus = Field(ClaimStatus.PENDING, alias="ClaimStatus")
    claim_date: Optional[datetime] = Field(None, alias="ClaimDate")
    pickup_location: Optional[str] = Field(None, alias="PickupLocation")


class ClaimUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple] = ("status",)

    status: Optional[ClaimStatus] = Field(None, alias="ClaimStatus")
    pickup_location: Optional[str] = Field(None, alias="PickupLocation")


class ClaimResponse(WireModel):
    id: int = Field(..., alias="ClaimId")
    user_id: int = Field(..., alias="UserId")
    food_item_id: int = Field(..., alias="FoodItemId")
    status: ClaimStatus = Field(..., alias="ClaimStatus")
    claim_date: datetime = Field(..., alias="ClaimDate")
    pickup_location: Optional[str] = Field(None, alias="PickupLocation")


class ClaimItemRequest(WireModel):
    user_id: int = Field(..., alias="UserId")
    pickup_location: Optional[str] = Field(None, alias="PickupLocation")


class ClaimAcceptResponse(WireModel):
    claim: ClaimResponse = Field(..., alias="Claim")
    transferred_item: FoodItemResponse = Field(..., alias="TransferredItem")


class UserClaimsResponse(WireModel):
    my_claims: List[ClaimResponse] = Field(..., alias="MyClaims")
    claims_on_my_items: List[ClaimResponse] = Field(..., alias="ClaimsOnMyItems")


# --- Expiration alerts ---
class ExpirationAlertCreate(WireModel):
    food_item_id: int = Field(..., alias="FoodItemId")
    alert_date: Optional[datetime] = Field(None, alias="AlertDate")
    status: AlertStatus = Field(AlertStatus.UNREAD, alias="AlertStatus")


class ExpirationAlertResponse(WireModel):
    id: int = Field(..., alias="AlertId")
    food_item_id: int = Field(..., alias="FoodItemId")
    alert_date: datetime = Field(..., alias="AlertDate")
    status: AlertStatus = Field(..., alias="AlertStatus")


class DisplayAlertResponse(WireModel):
    food_item_id: int = Field(..., alias="FoodItemId")
    item_name: str = Field(..., alias="FoodName")
    expiration_date: date = Field(..., alias="ExpirationDate")
    days_until_expiration: int = Field(..., alias="DaysUntilExpiration")
    message: str = Field(..., alias="Message")
    status: AlertStatus = Field(..., alias="AlertStatus")


class AlertSyncResponse(WireModel):
    created: int = Field(..., alias="Created")
    skipped: int = Field(..., alias="Skipped")
    failed: int = Field(..., alias="Failed")


# --- Friend groups ---
class FriendGroupCreate(WireModel):
    name: str = Field(..., alias="GroupName", min_length=1, max_length=100)
    owner_id: int = Field(..., alias="OwnerId")
    description: Optional[str] = Field(None, alias="Description")
    invite_user_ids: List[int] = Field(default_factory=list, alias="InviteUserIds")


class FriendGroupResponse(WireModel):
    id: int = Field(..., alias="GroupId")
    name: str = Field(..., alias="GroupName")
    owner_id: int = Field(..., alias="OwnerId")
    description: Optional[str] = Field(None, alias="Description")
    created_at: datetime = Field(..., alias="CreatedAt")


class GroupViewResponse(FriendGroupResponse):
    member_count: int = Field(..., alias="MemberCount")
    is_owner: bool = Field(..., alias="IsOwner")
    member_id: Optional[int] = Field(None, alias="GroupMemberId")


class GroupOverviewResponse(WireModel):
    my_groups: List[GroupViewResponse] = Field(..., alias="MyGroups")
    invitations: List[GroupViewResponse] = Field(..., alias="Invitations")
    explore: List[GroupViewResponse] = Field(..., alias="Explore")


class GroupMemberCreate(WireModel):
    group_id: int = Field(..., alias="GroupId")
    user_id: int = Field(..., alias="UserId")
    food_tag: Optional[str] = Field(None, alias="FoodTag")
    status: Optional[MembershipStatus] = Field(None, alias="Status")
    role: Optional[MemberRole] = Field(None, alias="Role")


class GroupMemberUpdate(WireModel):
    food_tag: Optional[str] = Field(None, alias="FoodTag")
    status: Optional[MembershipStatus] = Field(None, alias="Status")
    role: Optional[MemberRole] = Field(None, alias="Role")


class GroupMemberResponse(GroupMemberCreate):
    id: int = Field(..., alias="GroupMemberId")


class GroupInviteRequest(WireModel):
    user_id: int = Field(..., alias="UserId")


class GroupMemberDetail(WireModel):
    user_id: int = Field(..., alias="UserId")
    user_name: str = Field(..., alias="UserName")
    food_tag: Optional[str] = Field(None, alias="FoodTag")
    is_owner: bool = Field(..., alias="IsOwner")


class GroupDetailsResponse(WireModel):
    group: FriendGroupResponse = Field(..., alias="Group")
    members: List[GroupMemberDetail] = Field(..., alias="Members")
    food_items: List[FoodItemResponse] = Field(..., alias="FoodItems")


# --- Social posts ---
class SocialPostCreate(WireModel):
    platform: str = Field(..., alias="Platform", min_length=1)
    message: str = Field(..., alias="Message", min_length=1)
    status: str = Field("posted", alias="PostStatus")
    food_item_id: Optional[int] = Field(None, alias="FoodItemId")


class SocialPostResponse(SocialPostCreate):
    id: int = Field(..., alias="SocialPostId")
    post_date: datetime = Field(..., alias="PostDate")
