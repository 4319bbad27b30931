from pydantic_settings import BaseSettings
from typing import List, Optional, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "ERP Megui API"

    # Database Settings
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "erp_megui"

    # Full SQLAlchemy URL, takes precedence over the POSTGRES_* parts
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Create tables on startup instead of running Alembic (local development)
    AUTO_CREATE_TABLES: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Uploaded files
    UPLOAD_ROOT: str = "uploads"
    PUBLIC_URL_PREFIX: str = "/public"
    PHOTO_MAX_BYTES: int = 2 * 1024 * 1024
    PHOTO_ALLOWED_MIME_TYPES: Union[List[str], str] = ["image/jpeg", "image/png"]

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("BACKEND_CORS_ORIGINS", "PHOTO_ALLOWED_MIME_TYPES", mode="before")
    @classmethod
    def parse_string_list(cls, v: Union[List[str], str]) -> List[str]:
        """Parse a list setting from JSON string, comma-separated string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [item.strip() for item in v.split(",") if item.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
