from app.crud.base import CRUDBase
from app.models.puerto_pesca import PuertoPesca

puerto_pesca = CRUDBase(PuertoPesca)
