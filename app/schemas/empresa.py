from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class EmpresaCreate(BaseModel):
    razon_social: str = Field(..., min_length=1, max_length=200)
    ruc: str = Field(..., min_length=11, max_length=11, pattern=r"^\d{11}$")
    direccion: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None
    cesado: bool = False


class EmpresaUpdate(BaseModel):
    razon_social: Optional[str] = Field(None, min_length=1, max_length=200)
    ruc: Optional[str] = Field(None, min_length=11, max_length=11, pattern=r"^\d{11}$")
    direccion: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None
    cesado: Optional[bool] = None


class EmpresaResponse(BaseModel):
    id: int
    razon_social: str
    ruc: str
    direccion: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None
    cesado: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
