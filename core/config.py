"""Core configuration for the payload codec service."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields from .env
    )

    # Service
    service_name: str = "payload-codec"
    service_version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Compression settings
    compression_level: int = 6
    compression_max_decompressed_size: int = 4 * 1024 * 1024
    compression_chunk_size: int = 64 * 1024

    # MinIO (multipart uploads)
    minio_endpoint: str = "http://localhost:9000"
    minio_access_key: str = "minioadmin"
    minio_secret_key: str = "minioadmin"
    minio_secure: bool = False
    minio_region: str = ""
    multipart_presign_ttl_seconds: int = 900


settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance."""
    return settings
