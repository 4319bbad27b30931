"""
Database models package.
"""

from app.models.empresa import Empresa
from app.models.personal import Personal, CargoPersonal
from app.models.producto import Producto
from app.models.almacen import Almacen
from app.models.embarcacion import Embarcacion
from app.models.puerto_pesca import PuertoPesca
from app.models.motivo_acceso import MotivoAcceso
from app.models.incoterm import Incoterm

__all__ = [
    "Empresa",
    "Personal",
    "CargoPersonal",
    "Producto",
    "Almacen",
    "Embarcacion",
    "PuertoPesca",
    "MotivoAcceso",
    "Incoterm",
]
