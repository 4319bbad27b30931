"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern. Every entity gets a CRUDBase instance.
"""

from app.crud.personal import personal, cargo_personal
from app.crud.empresa import empresa
from app.crud.producto import producto
from app.crud.almacen import almacen
from app.crud.embarcacion import embarcacion
from app.crud.puerto_pesca import puerto_pesca
from app.crud.motivo_acceso import motivo_acceso
from app.crud.incoterm import incoterm

__all__ = [
    "personal",
    "cargo_personal",
    "empresa",
    "producto",
    "almacen",
    "embarcacion",
    "puerto_pesca",
    "motivo_acceso",
    "incoterm",
]
