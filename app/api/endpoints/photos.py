"""
Photo upload endpoints.

    POST /api/personal/{id}/foto            -> uploads/personal/foto-<id>.<ext>
    POST /api/producto-foto/{id}/foto       -> uploads/productos/foto-<id>.<ext>
    POST /api/embarcacion-foto/{id}/foto    -> uploads/embarcaciones/foto-<id>.<ext>

The multipart field is always "foto". Stored files are served back under
/public/<folder>/<filename> by the static mount in main.py.
"""

import os
from functools import lru_cache
from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, File, Path, UploadFile
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.crud import personal as personal_crud, producto as producto_crud, embarcacion as embarcacion_crud
from app.schemas.photo import PhotoUploadResponse
from app.services.photo_upload import PhotoOwner, PhotoUploadConfig, PhotoUploadHandler

PERSONAL_FOLDER = "personal"
PRODUCTO_FOLDER = "productos"
EMBARCACION_FOLDER = "embarcaciones"


def _config_for(folder: str) -> PhotoUploadConfig:
    return PhotoUploadConfig.build(
        directory=os.path.join(settings.UPLOAD_ROOT, folder),
        max_bytes=settings.PHOTO_MAX_BYTES,
        allowed_mime_types=settings.PHOTO_ALLOWED_MIME_TYPES,
    )


def _public_path(folder: str) -> str:
    return f"{settings.PUBLIC_URL_PREFIX.rstrip('/')}/{folder}"


# Handlers are process-wide singletons so their per-id locks are shared by all requests
@lru_cache
def get_personal_photo_handler() -> PhotoUploadHandler:
    return PhotoUploadHandler(
        _config_for(PERSONAL_FOLDER),
        PhotoOwner(
            crud=personal_crud,
            photo_field="url_foto_persona",
            public_path=_public_path(PERSONAL_FOLDER),
            not_found_message="Personal no encontrado",
        ),
    )


@lru_cache
def get_producto_photo_handler() -> PhotoUploadHandler:
    return PhotoUploadHandler(
        _config_for(PRODUCTO_FOLDER),
        PhotoOwner(
            crud=producto_crud,
            photo_field="url_foto_producto",
            public_path=_public_path(PRODUCTO_FOLDER),
            not_found_message="Producto no encontrado",
        ),
    )


@lru_cache
def get_embarcacion_photo_handler() -> PhotoUploadHandler:
    return PhotoUploadHandler(
        _config_for(EMBARCACION_FOLDER),
        PhotoOwner(
            crud=embarcacion_crud,
            photo_field="url_foto_embarcacion",
            public_path=_public_path(EMBARCACION_FOLDER),
            not_found_message="Embarcación no encontrada",
            success_message="Foto de embarcación subida correctamente.",
            failure_message="Error al subir foto de embarcación.",
        ),
    )


def build_photo_router(prefix: str, tags: List[str], handler_dependency: Callable[[], PhotoUploadHandler]) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags)

    @router.post("/{id}/foto", response_model=PhotoUploadResponse)
    async def upload_photo(
        id: int = Path(..., gt=0),
        foto: Optional[UploadFile] = File(None),
        db: Session = Depends(get_db),
        handler: PhotoUploadHandler = Depends(handler_dependency),
    ):
        """
        Upload a JPG or PNG photo (max 2 MB by default) and link it to the record.

        Returns the stored filename and its public URL. Uploading again for
        the same id replaces the previous photo.

        Raises:
            400: no file, unsupported type, file too large or invalid id
            404: record does not exist
            500: database update failed
        """
        return await handler.handle(db, id, foto)

    return router


personal_photo_router = build_photo_router("/personal", ["Personal"], get_personal_photo_handler)
producto_photo_router = build_photo_router("/producto-foto", ["Maestros"], get_producto_photo_handler)
embarcacion_photo_router = build_photo_router("/embarcacion-foto", ["Pesca"], get_embarcacion_photo_handler)
