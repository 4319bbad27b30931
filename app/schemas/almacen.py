from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class AlmacenCreate(BaseModel):
    empresa_id: Optional[int] = None
    nombre: str = Field(..., min_length=1, max_length=120)
    descripcion: Optional[str] = None
    permite_stock_negativo: bool = False
    activo: bool = True


class AlmacenUpdate(BaseModel):
    empresa_id: Optional[int] = None
    nombre: Optional[str] = Field(None, min_length=1, max_length=120)
    descripcion: Optional[str] = None
    permite_stock_negativo: Optional[bool] = None
    activo: Optional[bool] = None


class AlmacenResponse(BaseModel):
    id: int
    empresa_id: Optional[int] = None
    nombre: str
    descripcion: Optional[str] = None
    permite_stock_negativo: bool
    activo: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
