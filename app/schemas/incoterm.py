from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class IncotermCreate(BaseModel):
    """Incoterm codes are three upper-case letters (FOB, CIF, EXW...)"""
    codigo: str = Field(..., pattern=r"^[A-Z]{3}$")
    nombre: str = Field(..., min_length=1, max_length=120)
    descripcion: Optional[str] = None
    activo: bool = True


class IncotermUpdate(BaseModel):
    codigo: Optional[str] = Field(None, pattern=r"^[A-Z]{3}$")
    nombre: Optional[str] = Field(None, min_length=1, max_length=120)
    descripcion: Optional[str] = None
    activo: Optional[bool] = None


class IncotermResponse(BaseModel):
    id: int
    codigo: str
    nombre: str
    descripcion: Optional[str] = None
    activo: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
