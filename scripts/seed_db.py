"""
Drop and recreate the FoodShare database, then load a small demo data set.

Usage: python scripts/seed_db.py [--no-seed]
"""
import argparse
import logging
import os
import sys
from datetime import date, timedelta

# Add backend directory to path to allow importing foodshare modules
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "backend"))

from foodshare.database import engine, Base, get_db_context
from foodshare.models import (
    User,
    Category,
    FoodItem,
    FriendGroup,
    GroupMember,
    ItemStatus,
    MembershipStatus,
    MemberRole,
)
from foodshare.services.alert_service import alert_service
from foodshare.services.availability_service import availability_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_USERS = [
    ("Ana Popescu", "ana@example.com", "vegetarian"),
    ("Mihai Ionescu", "mihai@example.com", None),
    ("Elena Dumitru", "elena@example.com", "vegan"),
]
DEMO_CATEGORIES = ["Dairy", "Bakery", "Vegetables", "Meat", "Pantry"]
# (name, quantity, days until expiration, category, owner index, shared)
DEMO_ITEMS = [
    ("Milk", 2, 2, "Dairy", 0, False),
    ("Bread", 1, 1, "Bakery", 0, True),
    ("Tomatoes", 6, 4, "Vegetables", 1, True),
    ("Chicken breast", 1, 3, "Meat", 1, False),
    ("Rice", 1, 180, "Pantry", 2, False),
]


def reset_database():
    logger.info("Dropping all tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Recreating all tables...")
    Base.metadata.create_all(bind=engine)


def seed_database():
    with get_db_context() as db:
        seed_demo_data(db)


def seed_demo_data(db):
    today = date.today()
    users = [
        User(name=name, email=email, password="demo", food_preference=pref)
        for name, email, pref in DEMO_USERS
    ]
    db.add_all(users)
    categories = {name: Category(name=name) for name in DEMO_CATEGORIES}
    db.add_all(categories.values())
    db.flush()

    shared = []
    for name, quantity, days, category, owner, share in DEMO_ITEMS:
        item = FoodItem(
            name=name,
            quantity=quantity,
            expiration_date=today + timedelta(days=days),
            status=ItemStatus.NORMAL,
            user_id=users[owner].id,
            category_id=categories[category].id,
        )
        db.add(item)
        if share:
            shared.append(item)

    group = FriendGroup(name="Building B", owner_id=users[0].id, description="Neighbours")
    db.add(group)
    db.flush()
    db.add_all(
        [
            GroupMember(
                group_id=group.id,
                user_id=users[1].id,
                status=MembershipStatus.ACCEPTED,
                role=MemberRole.MEMBER,
            ),
            GroupMember(
                group_id=group.id,
                user_id=users[2].id,
                status=MembershipStatus.INVITED,
                role=MemberRole.INVITED,
            ),
        ]
    )
    db.commit()

    # Shared items are offered through the availability ledger.
    for item in shared:
        availability_service.mark_available(db, item.id)

    result = alert_service.sync_expiration_alerts(db)
    logger.info(
        f"Seeded {len(users)} users, {len(categories)} categories, "
        f"{len(DEMO_ITEMS)} items ({len(shared)} shared), {result.created} alerts"
    )


def main():
    parser = argparse.ArgumentParser(description="Reset the FoodShare database")
    parser.add_argument("--no-seed", action="store_true", help="only recreate the tables")
    args = parser.parse_args()

    try:
        logger.info("Starting database reset...")
        reset_database()
        if not args.no_seed:
            seed_database()
        logger.info("Database reset completed successfully.")
    except Exception as e:
        logger.error(f"Error resetting database: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
