"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from eventplanner.domain.repositories.base import BaseRepository
from eventplanner.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models.

    Failed writes roll the session back before the error propagates, so the
    session stays usable for the rest of the request.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get_by_id(self, id: Any) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def create(self, obj_in: Any) -> ModelType:
        # obj_in is a dict or a pydantic model
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump(exclude_unset=True)
        else:
            obj_data = obj_in

        db_obj = self.model(**obj_data)
        self.db.add(db_obj)
        self.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete_by_id(self, id: Any) -> int:
        try:
            deleted = (
                self.db.query(self.model)
                .filter(self.model.id == id)
                .delete(synchronize_session=False)
            )
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.commit()
        return deleted
