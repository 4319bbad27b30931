"""
Local filesystem storage for uploaded photos.

Files are streamed to a hidden temporary file inside the target directory and
only moved onto their final name with promote(), so a stored photo is never
observed half-written and a failed upload leaves nothing behind.
"""

import glob
import logging
import os
import tempfile
from typing import List, Optional

from fastapi import UploadFile

from app.core.errors import SizeLimitError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
TEMP_PREFIX = ".upload-"
TEMP_SUFFIX = ".part"


def _default_file_mode() -> int:
    """Mode a plain open(path, "wb") would give under the current umask"""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


# mkstemp creates files as 0600; stored photos must be readable by whatever serves /public
FILE_MODE = _default_file_mode()


class LocalStorage:
    """Local filesystem storage backend rooted at one directory"""

    def __init__(self, base_dir: str):
        self.base_dir = base_dir

    def ensure_dir(self) -> None:
        os.makedirs(self.base_dir, exist_ok=True)

    def path_for(self, filename: str) -> str:
        return os.path.join(self.base_dir, filename)

    async def save_stream(self, file: UploadFile, max_bytes: int) -> str:
        """
        Copy the upload into a temporary file, chunk by chunk.

        Raises:
            SizeLimitError: as soon as more than max_bytes have been read.
                The partial temporary file is removed first.
        """
        self.ensure_dir()
        fd, temp_path = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX, dir=self.base_dir)
        written = 0
        try:
            with os.fdopen(fd, "wb") as buffer:
                while True:
                    chunk = await file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > max_bytes:
                        raise SizeLimitError(
                            "El archivo excede el tamaño máximo permitido.",
                            details=f"Máximo {max_bytes} bytes."
                        )
                    buffer.write(chunk)
        except BaseException:
            self.delete_file(temp_path)
            raise

        logger.debug(f"Streamed {written} bytes to {temp_path}")
        return temp_path

    def promote(self, temp_path: str, filename: str) -> str:
        """Atomically replace the final file with the temporary one"""
        final_path = self.path_for(filename)
        os.chmod(temp_path, FILE_MODE)
        os.replace(temp_path, final_path)
        return final_path

    def delete_file(self, file_path: str) -> bool:
        """Delete file from local filesystem"""
        try:
            if os.path.exists(file_path):
                os.remove(file_path)
                return True
            return False
        except OSError as e:
            logger.error(f"Error deleting file {file_path}: {e}")
            return False

    def find_variants(self, stem: str) -> List[str]:
        """
        List stored files named <stem> or <stem>.<any extension>.

        Temporary upload files are never returned.
        """
        pattern = os.path.join(glob.escape(self.base_dir), glob.escape(stem) + ".*")
        matches = glob.glob(pattern)
        bare = self.path_for(stem)
        if os.path.isfile(bare):
            matches.append(bare)
        return sorted(matches)

    def remove_variants(self, stem: str, keep: Optional[str] = None) -> List[str]:
        """Delete every variant of <stem> except the file named keep"""
        removed = []
        for path in self.find_variants(stem):
            if keep is not None and os.path.basename(path) == keep:
                continue
            if self.delete_file(path):
                removed.append(os.path.basename(path))
        return removed
