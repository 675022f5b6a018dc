"""
API endpoints for expiration alerts.
"""

from typing import List
from fastapi import APIRouter, BackgroundTasks, Depends, Path, status
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.schemas import (
    ExpirationAlertCreate,
    ExpirationAlertResponse,
    DisplayAlertResponse,
    AlertSyncResponse,
    FoodItemResponse,
)
from foodshare.services.alert_service import alert_service
from foodshare.services.item_service import item_service

router = APIRouter()


@router.post("", response_model=ExpirationAlertResponse, status_code=status.HTTP_201_CREATED)
def create_alert(alert_in: ExpirationAlertCreate, db: Session = Depends(get_db)):
    return alert_service.create(db, alert_in.model_dump())


@router.get("", response_model=List[ExpirationAlertResponse])
def list_alerts(db: Session = Depends(get_db)):
    return alert_service.list(db)


@router.get("/expiring/{days}", response_model=List[FoodItemResponse])
def list_expiring_items(days: int = Path(..., ge=0), db: Session = Depends(get_db)):
    """Food items expiring between today and today + days."""
    return item_service.list_expiring(db, days)


@router.get("/byUser/{user_id}", response_model=List[DisplayAlertResponse])
def list_user_alerts(
    user_id: int,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """
    The user's alert list, recomputed from their items on every call.
    Persisted alerts are synced afterwards in the background; the outcome
    of that sync never affects this response.
    """
    alerts = alert_service.display_alerts_for_user(db, user_id)
    background_tasks.add_task(alert_service.sync_in_background)
    return alerts


@router.post("/sync", response_model=AlertSyncResponse)
def sync_alerts(db: Session = Depends(get_db)):
    """Create missing persisted alerts now and report the counts."""
    return alert_service.sync_expiration_alerts(db)
