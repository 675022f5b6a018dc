"""
Expiration alerts.

Two independent derivations live here and must stay separate:

* compute_display_alerts - recomputed on every read from the user's items,
  window [0, DISPLAY_ALERT_DAYS], every status, one entry per item name.
  It never touches the expiration_alerts table.
* sync_expiration_alerts - best effort writer of expiration_alerts rows for
  items in [0, SYNC_ALERT_DAYS] that are not claimed and have no row yet.
  Failures are logged and counted, never raised.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, List, Optional, Union

from sqlalchemy.orm import Session

from foodshare.config import settings
from foodshare.database import get_db_context
from foodshare.models.expiration_alert import ExpirationAlert
from foodshare.models.food_item import FoodItem
from foodshare.models.enums import AlertStatus, ItemStatus
from foodshare.services.crud import CRUDService

logger = logging.getLogger(__name__)


@dataclass
class DisplayAlert:
    food_item_id: int
    item_name: str
    expiration_date: date
    days_until_expiration: int
    message: str
    status: AlertStatus = AlertStatus.ACTIVE


@dataclass
class SyncResult:
    created: int = 0
    skipped: int = 0
    failed: int = 0


def days_until_expiration(
    expiration: Union[date, datetime], today: Union[date, datetime]
) -> int:
    """Whole days from today to the expiration day, both taken at midnight."""
    if isinstance(expiration, datetime):
        expiration = expiration.date()
    if isinstance(today, datetime):
        today = today.date()
    return (expiration - today).days


def expiry_message(days: int) -> str:
    return f"This item will expire in {days} day{'' if days == 1 else 's'}"


def compute_display_alerts(
    items: Iterable[FoodItem],
    user_id: int,
    today: Optional[date] = None,
    window: Optional[int] = None,
) -> List[DisplayAlert]:
    """
    Build the alert list shown to a user.

    Keeps the user's items expiring within [0, window] days whatever their
    status, sorts by urgency and keeps only the soonest entry per
    case-insensitive, trimmed item name.
    """
    today = today or date.today()
    window = settings.DISPLAY_ALERT_DAYS if window is None else window

    candidates = []
    for item in items:
        if item.user_id != user_id:
            continue
        days = days_until_expiration(item.expiration_date, today)
        if 0 <= days <= window:
            candidates.append((days, item))

    candidates.sort(key=lambda pair: pair[0])

    alerts = []
    seen_names = set()
    for days, item in candidates:
        key = item.name.strip().lower()
        if key in seen_names:
            continue
        seen_names.add(key)
        alerts.append(
            DisplayAlert(
                food_item_id=item.id,
                item_name=item.name,
                expiration_date=item.expiration_date,
                days_until_expiration=days,
                message=expiry_message(days),
            )
        )
    return alerts


def needs_persisted_alert(item: FoodItem, today: date, window: int) -> bool:
    if item.status == ItemStatus.CLAIMED:
        return False
    days = days_until_expiration(item.expiration_date, today)
    return 0 <= days <= window


class AlertService(CRUDService):
    model = ExpirationAlert
    label = "Expiration alert"

    def create(self, db: Session, data):
        data = dict(data)
        alert_date = data.get("alert_date")
        if isinstance(alert_date, date) and not isinstance(alert_date, datetime):
            data["alert_date"] = datetime.combine(alert_date, time.min)
        return super().create(db, data)

    def display_alerts_for_user(
        self, db: Session, user_id: int, today: Optional[date] = None
    ) -> List[DisplayAlert]:
        items = db.query(FoodItem).filter(FoodItem.user_id == user_id).all()
        return compute_display_alerts(items, user_id, today)

    def sync_expiration_alerts(
        self, db: Session, today: Optional[date] = None, window: Optional[int] = None
    ) -> SyncResult:
        """Create missing persisted alerts. Never raises."""
        today = today or date.today()
        window = settings.SYNC_ALERT_DAYS if window is None else window
        result = SyncResult()

        try:
            items = db.query(FoodItem).all()
            alerted = {row[0] for row in db.query(ExpirationAlert.food_item_id).all()}
        except Exception as e:
            db.rollback()
            logger.error(f"Alert sync failed: {e}", exc_info=True)
            result.failed += 1
            return result

        for item in items:
            if not needs_persisted_alert(item, today, window):
                continue
            if item.id in alerted:
                result.skipped += 1
                continue
            if self._create_alert(db, item):
                alerted.add(item.id)
                result.created += 1
            else:
                result.failed += 1

        logger.info(
            f"Alert sync: {result.created} created, {result.skipped} skipped, "
            f"{result.failed} failed"
        )
        return result

    def sync_alert_for_item(
        self,
        db: Session,
        item: FoodItem,
        today: Optional[date] = None,
        window: Optional[int] = None,
    ) -> bool:
        """Single-item variant run after an item is created or edited. Never raises."""
        today = today or date.today()
        window = settings.SYNC_ALERT_DAYS if window is None else window
        try:
            if not needs_persisted_alert(item, today, window):
                return False
            exists = (
                db.query(ExpirationAlert.id)
                .filter(ExpirationAlert.food_item_id == item.id)
                .first()
            )
            if exists:
                return False
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to sync alert for item {item.id}: {e}")
            return False
        return self._create_alert(db, item)

    def sync_in_background(self) -> None:
        """Entry point for BackgroundTasks; uses its own session."""
        try:
            with get_db_context() as db:
                self.sync_expiration_alerts(db)
        except Exception as e:
            logger.error(f"Background alert sync failed: {e}", exc_info=True)

    def _create_alert(self, db: Session, item: FoodItem) -> bool:
        try:
            db.add(
                ExpirationAlert(
                    food_item_id=item.id,
                    alert_date=datetime.combine(item.expiration_date, time.min),
                    status=AlertStatus.ACTIVE,
                )
            )
            db.commit()
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to create alert for item {item.id}: {e}")
            return False


alert_service = AlertService()
