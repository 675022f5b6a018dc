"""
Uniform create / list / get / update / delete over one model.

Every resource of the API follows the same record-level shape, so the
per-resource services only add their own queries and workflows on top.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodshare.core.errors import NotFoundError, ConflictError

logger = logging.getLogger(__name__)


class CRUDService:
    model: Type = None
    label: str = "Record"
    conflict_message: str = "Record violates a unique constraint"

    def create(self, db: Session, data: Dict[str, Any]):
        """Insert a record from a dict of attribute values."""
        values = {k: v for k, v in data.items() if v is not None}
        obj = self.model(**values)
        db.add(obj)
        self._commit(db)
        db.refresh(obj)
        return obj

    def list(self, db: Session) -> List:
        return db.query(self.model).order_by(self.model.id).all()

    def find(self, db: Session, obj_id: int) -> Optional[Any]:
        return db.get(self.model, obj_id)

    def get(self, db: Session, obj_id: int):
        """Return the record or raise NotFoundError."""
        obj = self.find(db, obj_id)
        if obj is None:
            raise NotFoundError(self.label, obj_id)
        return obj

    def update(self, db: Session, obj_id: int, data: Dict[str, Any]):
        """Apply a partial update; keys absent from data are left untouched."""
        obj = self.get(db, obj_id)
        for key, value in data.items():
            setattr(obj, key, value)
        self._commit(db)
        db.refresh(obj)
        return obj

    def delete(self, db: Session, obj_id: int) -> None:
        obj = self.get(db, obj_id)
        db.delete(obj)
        db.commit()
        logger.info(f"Deleted {self.label} {obj_id}")

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"{self.label} write rejected: {e.orig}")
            raise ConflictError(self.conflict_message)
