"""
Personnel and job-position endpoints.

Personnel listing accepts extra filters (empresa_id, es_vendedor); the rest
of the surface comes from the generic CRUD router.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.crud_router import build_crud_router, MAX_PAGE_SIZE
from app.core.database import get_db
from app.crud import personal as personal_crud, cargo_personal as cargo_personal_crud
from app.schemas.personal import (
    PersonalCreate, PersonalUpdate, PersonalResponse,
    CargoPersonalCreate, CargoPersonalUpdate, CargoPersonalResponse,
)

router = APIRouter(prefix="/personal", tags=["Personal"])


@router.get("/", response_model=List[PersonalResponse])
def list_personal(
    skip: int = 0,
    limit: int = 100,
    empresa_id: Optional[int] = None,
    es_vendedor: Optional[bool] = None,
    db: Session = Depends(get_db)
):
    """
    List personnel with pagination.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100, max: 100)
        empresa_id: Only personnel of this company
        es_vendedor: Only salespeople (true) or non-salespeople (false)
    """
    if limit > MAX_PAGE_SIZE:
        limit = MAX_PAGE_SIZE

    return personal_crud.get_multi(
        db, skip=max(skip, 0), limit=limit, empresa_id=empresa_id, es_vendedor=es_vendedor
    )


build_crud_router(
    crud=personal_crud,
    create_schema=PersonalCreate,
    update_schema=PersonalUpdate,
    response_schema=PersonalResponse,
    prefix="/personal",
    tags=["Personal"],
    not_found_message="Personal no encontrado",
    router=router,
    list_endpoint=False,
)

cargos_router = build_crud_router(
    crud=cargo_personal_crud,
    create_schema=CargoPersonalCreate,
    update_schema=CargoPersonalUpdate,
    response_schema=CargoPersonalResponse,
    prefix="/cargos-personal",
    tags=["Personal"],
    not_found_message="Cargo de personal no encontrado",
)
