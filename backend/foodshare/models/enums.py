"""
Closed sets of states shared by the models, schemas and services.

Values are the strings stored in the database and sent on the wire.
"""

import enum

from sqlalchemy import Enum


class ItemStatus(str, enum.Enum):
    NORMAL = "normal"
    AVAILABLE = "disponibil"  # opted into sharing
    CLAIMED = "claimed"


class ClaimStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class AlertStatus(str, enum.Enum):
    ACTIVE = "active"  # written by the alert sync
    UNREAD = "unread"  # table default for manually created alerts
    READ = "read"


class MembershipStatus(str, enum.Enum):
    INVITED = "invited"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class MemberRole(str, enum.Enum):
    OWNER = "owner"
    MEMBER = "member"
    INVITED = "invited"


def db_enum(enum_cls) -> Enum:
    """SQLAlchemy Enum column type that stores member values, not names."""
    return Enum(
        enum_cls,
        name=enum_cls.__name__.lower(),
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        validate_strings=True,
    )
