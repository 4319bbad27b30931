"""
Global exception handlers.

Every failure leaves the API as {"error": <message>, "details"?: <details>}:
- AppError subclasses keep their own status code
- Request validation errors (bad path ids, malformed bodies) become 400
- IntegrityError becomes 409, other SQLAlchemy errors become 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import AppError, ConflictError, DatabaseError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(
                f"{exc.code}: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path, "details": exc.details},
            )
        else:
            logger.warning(
                f"{exc.code}: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        details = [
            {
                "campo": ".".join(str(part) for part in error.get("loc", [])),
                "mensaje": error.get("msg"),
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder({"error": "Datos de entrada inválidos.", "details": details}),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
        error = ConflictError("El registro viola una restricción de unicidad o referencia.", details=str(exc.orig))
        return JSONResponse(status_code=error.status_code, content=error.to_response())

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
        error = DatabaseError("Error de base de datos", details=str(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_response())
