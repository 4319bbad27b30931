"""
Generic CRUD operations shared by every entity.

Each entity module instantiates CRUDBase with its SQLAlchemy model (or a small
subclass adding entity-specific queries), so the API layer talks to a uniform
repository interface: get_multi, get_by_id, create, update, delete.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Create, Read, Update, Delete.

        Args:
            model: A SQLAlchemy model class
        """
        self.model = model

    def get_by_id(self, db: Session, obj_id: int) -> Optional[ModelType]:
        """Retrieve a row by primary key, None if it does not exist"""
        return db.query(self.model).filter(self.model.id == obj_id).first()

    def get_multi(
        self,
        db: Session,
        skip: int = 0,
        limit: int = 100,
        **filters: Any
    ) -> List[ModelType]:
        """
        Retrieve rows ordered by id with pagination.

        Keyword filters are equality filters on model columns; None values
        are ignored.
        """
        query = db.query(self.model)
        for column, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, column) == value)

        return query.order_by(self.model.id).offset(skip).limit(limit).all()

    def create(self, db: Session, obj_in: Union[BaseModel, Dict[str, Any]]) -> ModelType:
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        db_obj = self.model(**data)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)

        return db_obj

    def update(
        self,
        db: Session,
        obj_id: int,
        obj_in: Union[BaseModel, Dict[str, Any]],
        commit: bool = True
    ) -> Optional[ModelType]:
        """
        Apply the fields present in obj_in to the row with id obj_id.

        Only fields explicitly sent by the client are written (exclude_unset),
        so a partial PUT body never blanks out other columns.

        Args:
            db: Database session
            obj_id: Row id to update
            obj_in: Pydantic schema or plain dict of column values
            commit: Commit and refresh; when False the change is only flushed

        Returns:
            Updated instance if found, None otherwise
        """
        db_obj = self.get_by_id(db, obj_id)
        if not db_obj:
            return None

        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for field, value in data.items():
            setattr(db_obj, field, value)

        if commit:
            db.commit()
            db.refresh(db_obj)
        else:
            db.flush()

        return db_obj

    def delete(self, db: Session, obj_id: int) -> bool:
        """
        Delete a row by id.

        Returns:
            True if deleted, False if not found
        """
        db_obj = self.get_by_id(db, obj_id)
        if not db_obj:
            return False

        db.delete(db_obj)
        db.commit()

        return True
