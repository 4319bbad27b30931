from app.crud.base import CRUDBase
from app.models.almacen import Almacen

almacen = CRUDBase(Almacen)
