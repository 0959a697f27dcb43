"""
Environment configuration for the FreeEats API.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
import secrets
import string
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Optional, Set, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


def _split_list(v: Union[str, List[str], Set[str]]) -> List[str]:
    """Accept a JSON array or a comma separated string."""
    if isinstance(v, str):
        if v.startswith('[') and v.endswith(']'):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        return [item.strip() for item in v.split(",") if item.strip()]
    return list(v)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    @staticmethod
    def get_secret_key_default() -> str:
        """Random per-process signing secret when none is configured"""
        alphabet = string.ascii_letters + string.digits
        return "".join(secrets.choice(alphabet) for _ in range(32))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Application configuration
    APP_NAME: str = Field(default="FreeEats API", alias="PROJECT_NAME")
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=["*"], alias="BACKEND_CORS_ORIGINS"
    )

    # Database configuration
    DATABASE_URL: str = "sqlite:///./freeeats.db"
    DATABASE_ECHO: bool = False
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10
    SEED_CAMPUSES_ON_STARTUP: bool = True

    # Object storage
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE: int = Field(default=10485760, alias="MAX_FILE_SIZE")
    ALLOWED_IMAGE_TYPES: Annotated[Set[str], NoDecode] = Field(
        default={"image/jpeg", "image/png", "image/gif", "image/webp"}
    )
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    UPLOAD_URL_TTL_SECONDS: int = 3600

    # Content moderation
    GOOGLE_GENERATIVE_AI_API_KEY: Optional[str] = None
    MODERATION_ENABLED: bool = True
    MODERATION_MODEL: str = "gemini-2.5-flash"

    # Geocoding
    GEOCODING_URL: str = "https://nominatim.openstreetmap.org/search"
    GEOCODING_USER_AGENT: str = "freeeats-api/0.1"
    GEOCODING_TIMEOUT: int = 10
    GEOCODING_VIEWBOX_DELTA: float = 0.1
    GEOCODING_LIMIT: int = 5

    # Identity provider
    CLERK_JWKS_URL: Optional[str] = None
    CLERK_ISSUER: Optional[str] = None
    JWT_SECRET_KEY: str = Field(default_factory=lambda: Settings.get_secret_key_default())
    JWT_ALGORITHM: str = "HS256"

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_FILE: Optional[str] = None
    ENABLE_STRUCTURED_LOGGING: bool = True

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from string to list"""
        return _split_list(v)

    @field_validator('ALLOWED_IMAGE_TYPES', mode='before')
    @classmethod
    def parse_image_types(cls, v):
        """Parse ALLOWED_IMAGE_TYPES from string to set"""
        return {item.lower() for item in _split_list(v)}

    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
