"""
API endpoints for the social feed.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.schemas import SocialPostCreate, SocialPostResponse
from foodshare.services.social_service import social_post_service

router = APIRouter()


@router.post("", response_model=SocialPostResponse, status_code=status.HTTP_201_CREATED)
def create_post(post_in: SocialPostCreate, db: Session = Depends(get_db)):
    return social_post_service.create(db, post_in.model_dump())


@router.get("", response_model=List[SocialPostResponse])
def list_posts(db: Session = Depends(get_db)):
    """Newest first."""
    return social_post_service.list(db)


@router.get("/byFoodItem/{food_item_id}", response_model=List[SocialPostResponse])
def list_posts_for_item(food_item_id: int, db: Session = Depends(get_db)):
    return social_post_service.by_food_item(db, food_item_id)
