"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from booking_api.core.exceptions import ConflictError
from booking_api.domain.models.mixins import SoftDeleteMixin
from booking_api.domain.repositories.base import BaseRepository, PageResult
from booking_api.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    conflict_error: Type[ConflictError] = ConflictError
    conflict_message: str = "Resource already exists"

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @property
    def soft_deletable(self) -> bool:
        return issubclass(self.model, SoftDeleteMixin)

    def query(self) -> Query:
        """Base query for every read path; hides soft-deleted rows."""
        query = self.db.query(self.model)
        if self.soft_deletable:
            query = query.filter(self.model.active())
        return query

    def paginate(self, query: Query, skip: int, limit: int) -> PageResult[ModelType]:
        total = query.order_by(None).count()
        return query.offset(skip).limit(limit).all(), total

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.query().filter(self.model.id == id).first()

    def conflict_message_for(self, obj: ModelType) -> str:
        return self.conflict_message

    def add(self, obj: ModelType) -> ModelType:
        self.db.add(obj)
        try:
            self.db.flush()
        except IntegrityError as exc:
            self.db.rollback()
            raise self.conflict_error(self.conflict_message_for(obj)) from exc
        return obj

    def create(self, obj_in: Any) -> ModelType:
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump(exclude_unset=True)
        elif isinstance(obj_in, dict):
            obj_data = obj_in
        else:
            return self._commit_new(obj_in)
        return self._commit_new(self.model(**obj_data))

    def _commit_new(self, db_obj: ModelType) -> ModelType:
        self.add(db_obj)
        self.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Any) -> ModelType:
        if hasattr(obj_in, "model_dump"):
            update_data = obj_in.model_dump(exclude_unset=True)
        else:
            update_data = obj_in

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.add(db_obj)
        self.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ModelType) -> None:
        if self.soft_deletable:
            db_obj.soft_delete()
        else:
            self.db.delete(db_obj)
        self.commit()

    def commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise self.conflict_error(self.conflict_message) from exc

    def rollback(self) -> None:
        self.db.rollback()
