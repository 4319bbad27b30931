from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime


class CargoPersonalCreate(BaseModel):
    """Schema for creating a job position"""
    descripcion: str = Field(..., min_length=1, max_length=120)
    activo: bool = True


class CargoPersonalUpdate(BaseModel):
    descripcion: Optional[str] = Field(None, min_length=1, max_length=120)
    activo: Optional[bool] = None


class CargoPersonalResponse(BaseModel):
    id: int
    descripcion: str
    activo: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PersonalCreate(BaseModel):
    """Schema for creating a personnel record"""
    empresa_id: Optional[int] = None
    cargo_id: Optional[int] = None
    nombres: str = Field(..., min_length=1, max_length=120)
    apellidos: str = Field(..., min_length=1, max_length=120)
    numero_documento: Optional[str] = Field(None, max_length=20)
    fecha_nacimiento: Optional[date] = None
    telefono: Optional[str] = None
    correo: Optional[str] = None
    es_vendedor: bool = False
    cesado: bool = False


class PersonalUpdate(BaseModel):
    """Partial update; the photo reference is only set through the upload endpoint"""
    empresa_id: Optional[int] = None
    cargo_id: Optional[int] = None
    nombres: Optional[str] = Field(None, min_length=1, max_length=120)
    apellidos: Optional[str] = Field(None, min_length=1, max_length=120)
    numero_documento: Optional[str] = Field(None, max_length=20)
    fecha_nacimiento: Optional[date] = None
    telefono: Optional[str] = None
    correo: Optional[str] = None
    es_vendedor: Optional[bool] = None
    cesado: Optional[bool] = None


class PersonalResponse(BaseModel):
    """Schema for personnel response"""
    id: int
    empresa_id: Optional[int] = None
    cargo_id: Optional[int] = None
    nombres: str
    apellidos: str
    numero_documento: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    telefono: Optional[str] = None
    correo: Optional[str] = None
    es_vendedor: bool
    cesado: bool
    url_foto_persona: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
