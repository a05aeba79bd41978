"""
Application configuration via Pydantic Settings.
Loads from environment variables with validation and defaults.
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache

VERSION = "1.0.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # === Server ===
    server_host: str = Field(default="0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(default=8001, alias="SERVER_PORT")
    debug: bool = Field(default=False, alias="DEBUG")

    # === Logging ===
    # Defaults to DEBUG when DEBUG=true, INFO otherwise
    log_level: Optional[str] = Field(default=None, alias="LOG_LEVEL")
    log_colors: bool = Field(default=True, alias="LOG_COLORS")

    # === Hosting ===
    # "/" for root hosting, "/wedgallery/" for a subdirectory mount
    base_path: str = Field(default="/", alias="BASE_PATH")

    # === Backends ===
    document_store: str = Field(default="supabase", alias="DOCUMENT_STORE")
    blob_store: str = Field(default="minio", alias="BLOB_STORE")

    # === Supabase ===
    supabase_url: Optional[str] = Field(default=None, alias="SUPABASE_URL")
    supabase_service_role_key: Optional[str] = Field(default=None, alias="SUPABASE_SERVICE_ROLE_KEY")

    # === MinIO ===
    minio_endpoint: str = Field(default="localhost:9000", alias="MINIO_ENDPOINT")
    minio_access_key: str = Field(default="minioadmin", alias="MINIO_ACCESS_KEY")
    minio_secret_key: str = Field(default="minioadmin", alias="MINIO_SECRET_KEY")
    minio_secure: bool = Field(default=False, alias="MINIO_SECURE")
    minio_bucket: str = Field(default="wedgallery", alias="MINIO_BUCKET")
    minio_public_url: str = Field(default="http://localhost:9000", alias="MINIO_PUBLIC_URL")

    # "legacy" tries every historical key layout, "deterministic" only the current one
    storage_key_layout: str = Field(default="legacy", alias="STORAGE_KEY_LAYOUT")

    # === CORS ===
    allowed_origins: str = Field(default="*", alias="ALLOWED_ORIGINS")

    @property
    def cors_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS into list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra env vars


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
