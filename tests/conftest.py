"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- A throwaway upload directory served under /public
- Sample records and image payloads
"""

import os
import shutil
import tempfile

# Settings are read at import time, so point them at test resources first
TEST_UPLOAD_ROOT = tempfile.mkdtemp(prefix="erp-uploads-")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite:///:memory:")
os.environ["UPLOAD_ROOT"] = TEST_UPLOAD_ROOT
os.environ.setdefault("JSON_LOGS", "false")

import pytest
from pathlib import Path
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.endpoints import photos
from app.core.database import Base, get_db
from app.models.personal import Personal
from app.models.producto import Producto
from app.models.embarcacion import Embarcacion
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 10 * 1024 + b"\xff\xd9"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 2048


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def upload_root():
    """
    The upload directory used by the app during tests.
    Emptied and photo handlers rebuilt around every test.
    """
    root = Path(TEST_UPLOAD_ROOT)
    for handler_factory in (
        photos.get_personal_photo_handler,
        photos.get_producto_photo_handler,
        photos.get_embarcacion_photo_handler,
    ):
        handler_factory.cache_clear()

    yield root

    for child in root.iterdir():
        if child.is_dir():
            shutil.rmtree(child)
        else:
            child.unlink()


@pytest.fixture
def client(db_session, upload_root):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def personal_42(db_session):
    """Personnel record with id 42"""
    persona = Personal(id=42, nombres="Juan", apellidos="Pérez Quispe", numero_documento="45871236")
    db_session.add(persona)
    db_session.commit()
    db_session.refresh(persona)
    return persona


@pytest.fixture
def producto_7(db_session):
    producto = Producto(id=7, codigo="HAR-001", descripcion_base="Harina de pescado")
    db_session.add(producto)
    db_session.commit()
    return producto


@pytest.fixture
def embarcacion_3(db_session):
    embarcacion = Embarcacion(id=3, matricula="PL-12345-CM", nombre="Don Lucho")
    db_session.add(embarcacion)
    db_session.commit()
    return embarcacion


@pytest.fixture
def jpeg_file():
    """A small JPEG upload (about 10 KB)"""
    return ("photo.jpg", JPEG_BYTES, "image/jpeg")


@pytest.fixture
def png_file():
    return ("photo.png", PNG_BYTES, "image/png")


@pytest.fixture
def sample_personal_data():
    """Sample personnel payload for testing"""
    return {
        "nombres": "María",
        "apellidos": "Torres Huamán",
        "numero_documento": "70123456",
        "fecha_nacimiento": "1990-05-14",
        "telefono": "987654321",
        "correo": "mtorres@example.com",
        "es_vendedor": True
    }
