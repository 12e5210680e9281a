"""
Component wiring.
Builds the logger, codec and storage collaborators from application settings.
"""

from datetime import timedelta
from typing import Optional

from core.config import Settings, get_settings
from pkg.compress import CompressConfig, GzipJsonCodec
from pkg.logger.logger import Logger, LoggerConfig
from pkg.minio import MinIOConfig, MinioMultipartUploader


def build_logger(settings: Optional[Settings] = None) -> Logger:
    """Create the process logger. DEBUG flag wins over LOG_LEVEL."""
    settings = settings or get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return Logger(LoggerConfig(level=level, service_name=settings.service_name))


def build_codec(settings: Optional[Settings] = None) -> GzipJsonCodec:
    """Create a codec using the configured level and size limit."""
    settings = settings or get_settings()
    return GzipJsonCodec(
        CompressConfig(
            level=settings.compression_level,
            max_decompressed_size=settings.compression_max_decompressed_size,
            chunk_size=settings.compression_chunk_size,
        )
    )


def build_multipart_uploader(
    settings: Optional[Settings] = None,
) -> MinioMultipartUploader:
    """Create the MinIO multipart uploader."""
    settings = settings or get_settings()
    return MinioMultipartUploader(
        MinIOConfig(
            endpoint=settings.minio_endpoint,
            access_key=settings.minio_access_key,
            secret_key=settings.minio_secret_key,
            secure=settings.minio_secure,
            region=settings.minio_region,
        )
    )


def presign_ttl(settings: Optional[Settings] = None) -> timedelta:
    """Lifetime of presigned part URLs."""
    settings = settings or get_settings()
    return timedelta(seconds=settings.multipart_presign_ttl_seconds)
