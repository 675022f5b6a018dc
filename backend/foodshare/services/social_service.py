"""
Social feed posts.
"""

from typing import List

from sqlalchemy.orm import Session

from foodshare.models.social_post import SocialPost
from foodshare.services.crud import CRUDService


class SocialPostService(CRUDService):
    model = SocialPost
    label = "Social post"

    def list(self, db: Session) -> List[SocialPost]:
        return db.query(SocialPost).order_by(SocialPost.post_date.desc(), SocialPost.id.desc()).all()

    def by_food_item(self, db: Session, food_item_id: int) -> List[SocialPost]:
        return (
            db.query(SocialPost)
            .filter(SocialPost.food_item_id == food_item_id)
            .order_by(SocialPost.post_date.desc())
            .all()
        )


social_post_service = SocialPostService()
