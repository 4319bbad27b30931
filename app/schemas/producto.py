from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ProductoCreate(BaseModel):
    empresa_id: Optional[int] = None
    codigo: str = Field(..., min_length=1, max_length=40)
    descripcion_base: str = Field(..., min_length=1, max_length=200)
    descripcion_extendida: Optional[str] = None
    cesado: bool = False


class ProductoUpdate(BaseModel):
    empresa_id: Optional[int] = None
    codigo: Optional[str] = Field(None, min_length=1, max_length=40)
    descripcion_base: Optional[str] = Field(None, min_length=1, max_length=200)
    descripcion_extendida: Optional[str] = None
    cesado: Optional[bool] = None


class ProductoResponse(BaseModel):
    id: int
    empresa_id: Optional[int] = None
    codigo: str
    descripcion_base: str
    descripcion_extendida: Optional[str] = None
    cesado: bool
    url_foto_producto: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
