from app.crud.base import CRUDBase
from app.models.empresa import Empresa

empresa = CRUDBase(Empresa)
