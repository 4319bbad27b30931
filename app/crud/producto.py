from app.crud.base import CRUDBase
from app.models.producto import Producto

producto = CRUDBase(Producto)
