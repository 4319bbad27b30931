"""
Error hierarchy for the ERP API.

Every error carries a user-facing message (Spanish, as returned to the
frontend), a stable code, an HTTP status and optional details. The global
handlers in app.api.error_handlers turn them into {"error", "details"} bodies.
"""

from typing import Any, Optional


class AppError(Exception):
    """Base exception for all API errors."""

    code = "ERR_INTERNO"
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        """Convert to the JSON error body."""
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    """Malformed input: unsupported file type, missing file, bad identifier."""
    code = "ERR_VALIDACION"
    status_code = 400


class SizeLimitError(ValidationError):
    """Uploaded file exceeds the configured byte limit."""
    code = "ERR_TAMANO_ARCHIVO"


class NotFoundError(AppError):
    code = "ERR_NO_ENCONTRADO"
    status_code = 404


class ConflictError(AppError):
    code = "ERR_CONFLICTO"
    status_code = 409


class DatabaseError(AppError):
    code = "ERR_BD"
    status_code = 500


class PersistenceError(DatabaseError):
    """Database update failed after the uploaded file was received."""
