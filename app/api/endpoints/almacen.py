"""
Warehouse endpoints.
"""

from app.api.crud_router import build_crud_router
from app.crud import almacen as almacen_crud
from app.schemas.almacen import AlmacenCreate, AlmacenUpdate, AlmacenResponse

router = build_crud_router(
    crud=almacen_crud,
    create_schema=AlmacenCreate,
    update_schema=AlmacenUpdate,
    response_schema=AlmacenResponse,
    prefix="/almacen",
    tags=["Almacen"],
    not_found_message="Almacén no encontrado",
)
