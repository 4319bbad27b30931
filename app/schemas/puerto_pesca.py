from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class PuertoPescaCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=120)
    zona: Optional[str] = None
    provincia: Optional[str] = None
    departamento: Optional[str] = None
    latitud: Optional[float] = Field(None, ge=-90, le=90)
    longitud: Optional[float] = Field(None, ge=-180, le=180)
    activo: bool = True


class PuertoPescaUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=120)
    zona: Optional[str] = None
    provincia: Optional[str] = None
    departamento: Optional[str] = None
    latitud: Optional[float] = Field(None, ge=-90, le=90)
    longitud: Optional[float] = Field(None, ge=-180, le=180)
    activo: Optional[bool] = None


class PuertoPescaResponse(BaseModel):
    id: int
    nombre: str
    zona: Optional[str] = None
    provincia: Optional[str] = None
    departamento: Optional[str] = None
    latitud: Optional[float] = None
    longitud: Optional[float] = None
    activo: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
