from sqlalchemy import Column, Integer, String, Boolean, Float, DateTime, ForeignKey, func
from app.core.database import Base


class Embarcacion(Base):
    """
    Fishing vessel.
    url_foto_embarcacion holds the stored filename of the vessel photo.
    """
    __tablename__ = "embarcacion"

    id = Column(Integer, primary_key=True, index=True)
    empresa_id = Column(Integer, ForeignKey("empresa.id"), nullable=True, index=True)
    matricula = Column(String, nullable=False, unique=True, index=True)
    nombre = Column(String, nullable=False)
    capacidad_bodega_ton = Column(Float, nullable=True)
    activo = Column(Boolean, default=True, nullable=False)

    url_foto_embarcacion = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Embarcacion(id={self.id}, matricula='{self.matricula}')>"
