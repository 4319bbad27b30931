from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class MotivoAccesoCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=120)
    descripcion: Optional[str] = None
    activo: bool = True


class MotivoAccesoUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=120)
    descripcion: Optional[str] = None
    activo: Optional[bool] = None


class MotivoAccesoResponse(BaseModel):
    id: int
    nombre: str
    descripcion: Optional[str] = None
    activo: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
