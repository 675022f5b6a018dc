"""
User and category stores.
"""

from sqlalchemy.orm import Session

from foodshare.models.user import User
from foodshare.models.category import Category
from foodshare.services.crud import CRUDService


class UserService(CRUDService):
    model = User
    label = "User"
    conflict_message = "User with this email already exists"

    def get_by_email(self, db: Session, email: str):
        return db.query(User).filter(User.email == email).first()


class CategoryService(CRUDService):
    model = Category
    label = "Category"
    conflict_message = "Category with this name already exists"


user_service = UserService()
category_service = CategoryService()
