"""
Sales endpoints.
"""

from app.api.crud_router import build_crud_router
from app.crud import incoterm as incoterm_crud
from app.schemas.incoterm import IncotermCreate, IncotermUpdate, IncotermResponse

incoterm_router = build_crud_router(
    crud=incoterm_crud,
    create_schema=IncotermCreate,
    update_schema=IncotermUpdate,
    response_schema=IncotermResponse,
    prefix="/incoterm",
    tags=["Ventas"],
    not_found_message="Incoterm no encontrado",
)
