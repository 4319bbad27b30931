from app.crud.base import CRUDBase
from app.models.motivo_acceso import MotivoAcceso

motivo_acceso = CRUDBase(MotivoAcceso)
