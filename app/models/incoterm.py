from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from app.core.database import Base


class Incoterm(Base):
    """International commercial term used in sales quotations."""
    __tablename__ = "incoterm"

    id = Column(Integer, primary_key=True, index=True)
    codigo = Column(String(3), nullable=False, unique=True, index=True)
    nombre = Column(String, nullable=False)
    descripcion = Column(String, nullable=True)
    activo = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Incoterm(id={self.id}, codigo='{self.codigo}')>"
