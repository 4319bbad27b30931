from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class EmbarcacionCreate(BaseModel):
    empresa_id: Optional[int] = None
    matricula: str = Field(..., min_length=1, max_length=30)
    nombre: str = Field(..., min_length=1, max_length=120)
    capacidad_bodega_ton: Optional[float] = Field(None, ge=0)
    activo: bool = True


class EmbarcacionUpdate(BaseModel):
    empresa_id: Optional[int] = None
    matricula: Optional[str] = Field(None, min_length=1, max_length=30)
    nombre: Optional[str] = Field(None, min_length=1, max_length=120)
    capacidad_bodega_ton: Optional[float] = Field(None, ge=0)
    activo: Optional[bool] = None


class EmbarcacionResponse(BaseModel):
    id: int
    empresa_id: Optional[int] = None
    matricula: str
    nombre: str
    capacidad_bodega_ton: Optional[float] = None
    activo: bool
    url_foto_embarcacion: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
