"""
Database bootstrap endpoint.
"""

import logging
from fastapi import APIRouter

from foodshare.database import init_db
from foodshare.schemas import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=MessageResponse)
def create_database():
    """Create any missing tables. Safe to call repeatedly."""
    init_db()
    logger.info("Database tables ensured via /api/create")
    return {"message": "Database created successfully"}
