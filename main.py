import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.logging_config import setup_logging
from app.api.error_handlers import register_error_handlers
from app.api.upload_limit import UploadSizeLimitMiddleware
from app.api.endpoints import (
    acceso_instalaciones,
    almacen,
    health,
    maestros,
    personal,
    pesca,
    photos,
    ventas,
)

setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up ERP Megui API...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down ERP Megui API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="ERP master data API: personnel, warehouse, fishing, access control and sales",
    lifespan=lifespan
)

# Oversized photo uploads are refused from their Content-Length before the body is read
app.add_middleware(UploadSizeLimitMiddleware, max_bytes=settings.PHOTO_MAX_BYTES)

# Configure CORS (added last so it wraps every other middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
# Photo routers go before the CRUD routers sharing their prefix
app.include_router(photos.personal_photo_router, prefix=settings.API_PREFIX)
app.include_router(photos.producto_photo_router, prefix=settings.API_PREFIX)
app.include_router(photos.embarcacion_photo_router, prefix=settings.API_PREFIX)
app.include_router(personal.router, prefix=settings.API_PREFIX)
app.include_router(personal.cargos_router, prefix=settings.API_PREFIX)
app.include_router(maestros.empresa_router, prefix=settings.API_PREFIX)
app.include_router(maestros.producto_router, prefix=settings.API_PREFIX)
app.include_router(almacen.router, prefix=settings.API_PREFIX)
app.include_router(pesca.embarcacion_router, prefix=settings.API_PREFIX)
app.include_router(pesca.puerto_pesca_router, prefix=settings.API_PREFIX)
app.include_router(acceso_instalaciones.motivo_acceso_router, prefix=settings.API_PREFIX)
app.include_router(ventas.incoterm_router, prefix=settings.API_PREFIX)
app.include_router(health.router)

# Serve stored photos: /public/personal/foto-42.jpg -> uploads/personal/foto-42.jpg
os.makedirs(settings.UPLOAD_ROOT, exist_ok=True)
app.mount(settings.PUBLIC_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_ROOT), name="public")


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": "ERP Megui API",
        "version": "1.0.0",
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
