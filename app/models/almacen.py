from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func
from app.core.database import Base


class Almacen(Base):
    __tablename__ = "almacen"

    id = Column(Integer, primary_key=True, index=True)
    empresa_id = Column(Integer, ForeignKey("empresa.id"), nullable=True, index=True)
    nombre = Column(String, nullable=False)
    descripcion = Column(String, nullable=True)
    permite_stock_negativo = Column(Boolean, default=False, nullable=False)
    activo = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Almacen(id={self.id}, nombre='{self.nombre}')>"
