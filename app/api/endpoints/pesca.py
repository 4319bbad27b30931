"""
Fishing-operations endpoints: vessels and fishing ports.
"""

from app.api.crud_router import build_crud_router
from app.crud import embarcacion as embarcacion_crud, puerto_pesca as puerto_pesca_crud
from app.schemas.embarcacion import EmbarcacionCreate, EmbarcacionUpdate, EmbarcacionResponse
from app.schemas.puerto_pesca import PuertoPescaCreate, PuertoPescaUpdate, PuertoPescaResponse

embarcacion_router = build_crud_router(
    crud=embarcacion_crud,
    create_schema=EmbarcacionCreate,
    update_schema=EmbarcacionUpdate,
    response_schema=EmbarcacionResponse,
    prefix="/embarcacion",
    tags=["Pesca"],
    not_found_message="Embarcación no encontrada",
)

puerto_pesca_router = build_crud_router(
    crud=puerto_pesca_crud,
    create_schema=PuertoPescaCreate,
    update_schema=PuertoPescaUpdate,
    response_schema=PuertoPescaResponse,
    prefix="/puerto-pesca",
    tags=["Pesca"],
    not_found_message="Puerto de pesca no encontrado",
)
