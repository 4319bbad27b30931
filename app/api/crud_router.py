"""
Router factory for the five-verb CRUD surface shared by every entity.

    GET    /        list (skip/limit pagination, limit capped at 100)
    GET    /{id}    retrieve, 404 if missing
    POST   /        create, 201
    PUT    /{id}    partial update, 404 if missing
    DELETE /{id}    delete, 204, 404 if missing
"""

import logging
from typing import List, Optional, Type

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotFoundError
from app.crud.base import CRUDBase

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def build_crud_router(
    *,
    crud: CRUDBase,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    prefix: str,
    tags: List[str],
    not_found_message: str,
    router: Optional[APIRouter] = None,
    list_endpoint: bool = True,
) -> APIRouter:
    """
    Attach the generic endpoints for one entity to a router.

    Pass an existing router with list_endpoint=False when the entity needs
    its own listing route (extra query filters).
    """
    router = router or APIRouter(prefix=prefix, tags=tags)
    entity = crud.model.__name__

    def get_or_404(db: Session, obj_id: int):
        db_obj = crud.get_by_id(db, obj_id)
        if not db_obj:
            raise NotFoundError(not_found_message)
        return db_obj

    if list_endpoint:
        @router.get("/", response_model=List[response_schema])
        def list_items(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
            if limit > MAX_PAGE_SIZE:
                limit = MAX_PAGE_SIZE
            return crud.get_multi(db, skip=max(skip, 0), limit=limit)

    @router.get("/{id}", response_model=response_schema)
    def get_item(id: int = Path(..., gt=0), db: Session = Depends(get_db)):
        return get_or_404(db, id)

    @router.post("/", status_code=status.HTTP_201_CREATED, response_model=response_schema)
    def create_item(payload: create_schema, db: Session = Depends(get_db)):
        try:
            db_obj = crud.create(db, payload)
        except Exception:
            db.rollback()
            raise
        logger.info(f"Created {entity} {db_obj.id}")
        return db_obj

    @router.put("/{id}", response_model=response_schema)
    def update_item(payload: update_schema, id: int = Path(..., gt=0), db: Session = Depends(get_db)):
        try:
            db_obj = crud.update(db, id, payload)
        except Exception:
            db.rollback()
            raise
        if not db_obj:
            raise NotFoundError(not_found_message)
        logger.info(f"Updated {entity} {id}")
        return db_obj

    @router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(id: int = Path(..., gt=0), db: Session = Depends(get_db)):
        try:
            deleted = crud.delete(db, id)
        except Exception:
            db.rollback()
            raise
        if not deleted:
            raise NotFoundError(not_found_message)
        logger.info(f"Deleted {entity} {id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
