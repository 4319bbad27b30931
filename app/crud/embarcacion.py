from app.crud.base import CRUDBase
from app.models.embarcacion import Embarcacion

embarcacion = CRUDBase(Embarcacion)
