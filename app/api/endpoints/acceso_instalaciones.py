"""
Access-control endpoints.
"""

from app.api.crud_router import build_crud_router
from app.crud import motivo_acceso as motivo_acceso_crud
from app.schemas.motivo_acceso import MotivoAccesoCreate, MotivoAccesoUpdate, MotivoAccesoResponse

motivo_acceso_router = build_crud_router(
    crud=motivo_acceso_crud,
    create_schema=MotivoAccesoCreate,
    update_schema=MotivoAccesoUpdate,
    response_schema=MotivoAccesoResponse,
    prefix="/motivo-acceso",
    tags=["Acceso Instalaciones"],
    not_found_message="MotivoAcceso no encontrado",
)
