"""
Master-data endpoints: companies and products.
"""

from app.api.crud_router import build_crud_router
from app.crud import empresa as empresa_crud, producto as producto_crud
from app.schemas.empresa import EmpresaCreate, EmpresaUpdate, EmpresaResponse
from app.schemas.producto import ProductoCreate, ProductoUpdate, ProductoResponse

empresa_router = build_crud_router(
    crud=empresa_crud,
    create_schema=EmpresaCreate,
    update_schema=EmpresaUpdate,
    response_schema=EmpresaResponse,
    prefix="/empresa",
    tags=["Maestros"],
    not_found_message="Empresa no encontrada",
)

producto_router = build_crud_router(
    crud=producto_crud,
    create_schema=ProductoCreate,
    update_schema=ProductoUpdate,
    response_schema=ProductoResponse,
    prefix="/producto",
    tags=["Maestros"],
    not_found_message="Producto no encontrado",
)
