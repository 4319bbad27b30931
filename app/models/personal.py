from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, ForeignKey, func
from app.core.database import Base


class CargoPersonal(Base):
    """Job position a personnel record can hold."""
    __tablename__ = "cargos_personal"

    id = Column(Integer, primary_key=True, index=True)
    descripcion = Column(String, nullable=False, unique=True)
    activo = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<CargoPersonal(id={self.id}, descripcion='{self.descripcion}')>"


class Personal(Base):
    """
    Personnel record.

    url_foto_persona holds the stored filename of the person's photo
    (foto-<id>.<ext>), set by the photo upload endpoint.
    """
    __tablename__ = "personal"

    id = Column(Integer, primary_key=True, index=True)
    empresa_id = Column(Integer, ForeignKey("empresa.id"), nullable=True, index=True)
    cargo_id = Column(Integer, ForeignKey("cargos_personal.id"), nullable=True)

    nombres = Column(String, nullable=False)
    apellidos = Column(String, nullable=False)
    numero_documento = Column(String, nullable=True, index=True)
    fecha_nacimiento = Column(Date, nullable=True)
    telefono = Column(String, nullable=True)
    correo = Column(String, nullable=True)
    es_vendedor = Column(Boolean, default=False, nullable=False)
    cesado = Column(Boolean, default=False, nullable=False)

    url_foto_persona = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Personal(id={self.id}, nombres='{self.nombres}', apellidos='{self.apellidos}')>"
