from sqlalchemy import Column, Integer, String, Boolean, Float, DateTime, func
from app.core.database import Base


class PuertoPesca(Base):
    """Fishing port where catches are landed."""
    __tablename__ = "puerto_pesca"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String, nullable=False)
    zona = Column(String, nullable=True)
    provincia = Column(String, nullable=True)
    departamento = Column(String, nullable=True)
    latitud = Column(Float, nullable=True)
    longitud = Column(Float, nullable=True)
    activo = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<PuertoPesca(id={self.id}, nombre='{self.nombre}')>"
