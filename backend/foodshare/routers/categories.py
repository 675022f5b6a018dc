"""
API endpoints for food categories.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from foodshare.database import get_db
from foodshare.schemas import CategoryCreate, CategoryUpdate, CategoryResponse, MessageResponse
from foodshare.services.user_service import category_service

router = APIRouter()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(category_in: CategoryCreate, db: Session = Depends(get_db)):
    return category_service.create(db, category_in.model_dump())


@router.get("", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return category_service.list(db)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return category_service.get(db, category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int, category_in: CategoryUpdate, db: Session = Depends(get_db)
):
    return category_service.update(db, category_id, category_in.model_dump(exclude_unset=True))


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    category_service.delete(db, category_id)
    return {"message": "Deleted"}
