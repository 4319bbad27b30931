from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func
from app.core.database import Base


class Producto(Base):
    """
    Product master record.
    url_foto_producto holds the stored filename of the product photo.
    """
    __tablename__ = "producto"

    id = Column(Integer, primary_key=True, index=True)
    empresa_id = Column(Integer, ForeignKey("empresa.id"), nullable=True, index=True)
    codigo = Column(String, nullable=False, unique=True, index=True)
    descripcion_base = Column(String, nullable=False)
    descripcion_extendida = Column(String, nullable=True)
    cesado = Column(Boolean, default=False, nullable=False)

    url_foto_producto = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Producto(id={self.id}, codigo='{self.codigo}')>"
