"""MinIO-backed multipart upload capability."""

from .interface import IMultipartUpload
from .minio import MinioMultipartUploader
from .type import CompletedPart, MinIOConfig

__all__ = [
    "IMultipartUpload",
    "MinioMultipartUploader",
    "CompletedPart",
    "MinIOConfig",
]
