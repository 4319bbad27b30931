from app.crud.base import CRUDBase
from app.models.incoterm import Incoterm

incoterm = CRUDBase(Incoterm)
