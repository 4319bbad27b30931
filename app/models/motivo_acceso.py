from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from app.core.database import Base


class MotivoAcceso(Base):
    """Reason recorded when someone enters a facility."""
    __tablename__ = "motivo_acceso"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String, nullable=False, unique=True)
    descripcion = Column(String, nullable=True)
    activo = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<MotivoAcceso(id={self.id}, nombre='{self.nombre}')>"
