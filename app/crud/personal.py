"""
CRUD operations for personnel and job positions.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.personal import Personal, CargoPersonal


class CRUDPersonal(CRUDBase[Personal]):
    def get_multi(
        self,
        db: Session,
        skip: int = 0,
        limit: int = 100,
        empresa_id: Optional[int] = None,
        es_vendedor: Optional[bool] = None
    ) -> List[Personal]:
        """
        List personnel, optionally filtered by company and by salesperson flag.
        """
        return super().get_multi(db, skip=skip, limit=limit, empresa_id=empresa_id, es_vendedor=es_vendedor)


personal = CRUDPersonal(Personal)
cargo_personal = CRUDBase(CargoPersonal)
