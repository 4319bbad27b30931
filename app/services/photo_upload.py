"""
Photo upload handling for entities that carry a photo reference column.

Flow for one request:
1. Validate owner id, presence of the file and its MIME type (nothing written yet)
2. Under a per-owner lock, check the owner row exists and stream the file to a
   temporary path, aborting past max_bytes
3. Set the owner's photo column to foto-<id><ext> (flushed, not yet committed)
4. Move the temporary file onto foto-<id><ext>
5. Commit, then drop any foto-<id>.* left over from an upload with a
   different extension

The commit only happens once the file is in place. If the update or the move
fails the session is rolled back and the temporary file deleted, so the row
never references a missing file and the disk never holds an unreferenced photo.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, PersistenceError, ValidationError
from app.core.locks import KeyedLock
from app.core.storage import LocalStorage
from app.crud.base import CRUDBase

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 2 * 1024 * 1024
DEFAULT_ALLOWED_MIME_TYPES = frozenset({"image/jpeg", "image/png"})

# Used when the client filename has no extension
EXTENSION_BY_MIME = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
}


@dataclass(frozen=True)
class PhotoUploadConfig:
    """Where photos go and what is accepted."""
    directory: str
    max_bytes: int = DEFAULT_MAX_BYTES
    allowed_mime_types: FrozenSet[str] = DEFAULT_ALLOWED_MIME_TYPES

    @classmethod
    def build(cls, directory: str, max_bytes: int, allowed_mime_types: Iterable[str]) -> "PhotoUploadConfig":
        return cls(directory=directory, max_bytes=max_bytes, allowed_mime_types=frozenset(allowed_mime_types))


@dataclass(frozen=True)
class PhotoOwner:
    """The entity a photo belongs to and the wording of its responses."""
    crud: CRUDBase
    photo_field: str
    public_path: str
    not_found_message: str
    success_message: str = "Foto subida correctamente."
    failure_message: str = "Error al subir foto."


@dataclass
class StoredPhoto:
    owner_id: int
    filename: str
    extension: str
    content_type: str
    size: int
    replaced: list = field(default_factory=list)


def stored_filename(owner_id: int, extension: str) -> str:
    """foto-<id><ext>, e.g. foto-42.jpg"""
    return f"foto-{owner_id}{extension}"


def resolve_extension(filename: Optional[str], content_type: str) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    if not ext:
        ext = EXTENSION_BY_MIME.get(content_type, "")
    return ext


class PhotoUploadHandler:
    """
    Accepts one photo per request for one owner row.

    The handler holds its own lock registry, so two uploads for the same owner
    id run one after the other while uploads for different ids proceed
    concurrently.
    """

    def __init__(self, config: PhotoUploadConfig, owner: PhotoOwner, storage: Optional[LocalStorage] = None):
        self.config = config
        self.owner = owner
        self.storage = storage or LocalStorage(config.directory)
        self._locks = KeyedLock()

    def public_url(self, filename: str) -> str:
        return f"{self.owner.public_path.rstrip('/')}/{filename}"

    def validate(self, owner_id: int, file: Optional[UploadFile]) -> None:
        """Reject the request before anything touches the disk or the database."""
        if owner_id <= 0:
            raise ValidationError("Identificador inválido.")

        if file is None or not file.filename:
            raise ValidationError("No se envió archivo.")

        if file.content_type not in self.config.allowed_mime_types:
            raise ValidationError("Solo se permiten archivos JPG o PNG.")

    async def store(self, db: Session, owner_id: int, file: Optional[UploadFile]) -> StoredPhoto:
        """
        Validate, write and record an uploaded photo.

        Raises:
            ValidationError: missing file, bad MIME type or bad id
            SizeLimitError: file larger than config.max_bytes
            NotFoundError: owner row does not exist
            PersistenceError: database update failed
        """
        self.validate(owner_id, file)

        extension = resolve_extension(file.filename, file.content_type)
        filename = stored_filename(owner_id, extension)

        async with self._locks.acquire(owner_id):
            record = self.owner.crud.get_by_id(db, owner_id)
            if record is None:
                raise NotFoundError(self.owner.not_found_message)
            previous = getattr(record, self.owner.photo_field)

            temp_path = await self.storage.save_stream(file, self.config.max_bytes)
            size = os.path.getsize(temp_path)

            try:
                record = self.owner.crud.update(db, owner_id, {self.owner.photo_field: filename}, commit=False)
            except SQLAlchemyError as e:
                db.rollback()
                self.storage.delete_file(temp_path)
                logger.error(f"Failed to record photo {filename} for id {owner_id}: {e}")
                raise PersistenceError(self.owner.failure_message, details=str(e))

            if record is None:
                self.storage.delete_file(temp_path)
                raise NotFoundError(self.owner.not_found_message)

            try:
                final_path = self.storage.promote(temp_path, filename)
            except OSError as e:
                db.rollback()
                self.storage.delete_file(temp_path)
                logger.error(f"Failed to move photo into place as {filename}: {e}")
                raise PersistenceError(self.owner.failure_message, details=str(e))

            try:
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                # The row still references the previous file, which is untouched unless it had this name
                if previous != filename:
                    self.storage.delete_file(final_path)
                logger.error(f"Failed to commit photo {filename} for id {owner_id}: {e}")
                raise PersistenceError(self.owner.failure_message, details=str(e))

            replaced = self.storage.remove_variants(f"foto-{owner_id}", keep=filename)

        if replaced:
            logger.info(f"Removed previous photo files {replaced} for id {owner_id}")
        logger.info(f"Stored photo {filename} ({size} bytes) for id {owner_id}")

        return StoredPhoto(
            owner_id=owner_id,
            filename=filename,
            extension=extension,
            content_type=file.content_type,
            size=size,
            replaced=replaced,
        )

    async def handle(self, db: Session, owner_id: int, file: Optional[UploadFile]) -> dict:
        """Run store() and build the JSON body returned to the client."""
        photo = await self.store(db, owner_id, file)
        return {
            "message": self.owner.success_message,
            "foto": photo.filename,
            "url": self.public_url(photo.filename),
        }
