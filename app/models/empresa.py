from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from app.core.database import Base


class Empresa(Base):
    """Company that owns personnel, products, warehouses and vessels."""
    __tablename__ = "empresa"

    id = Column(Integer, primary_key=True, index=True)
    razon_social = Column(String, nullable=False)
    ruc = Column(String(11), nullable=False, unique=True, index=True)
    direccion = Column(String, nullable=True)
    telefono = Column(String, nullable=True)
    email = Column(String, nullable=True)
    cesado = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Empresa(id={self.id}, ruc='{self.ruc}')>"
