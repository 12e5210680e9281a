from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .constant import *


@dataclass
class MinIOConfig:
    """MinIO client configuration.

    Attributes:
        endpoint: MinIO server endpoint (e.g., 'localhost:9000')
        access_key: Access key for authentication
        secret_key: Secret key for authentication
        secure: Whether to use HTTPS
        region: Optional region name
    """

    endpoint: str
    access_key: str
    secret_key: str
    secure: bool = False
    region: Optional[str] = None

    def __post_init__(self):
        """Validate configuration."""
        if not self.endpoint or not self.endpoint.strip():
            raise ValueError("endpoint cannot be empty")

        if not self.access_key or not self.access_key.strip():
            raise ValueError("access_key cannot be empty")

        if not self.secret_key or not self.secret_key.strip():
            raise ValueError("secret_key cannot be empty")

        self.endpoint = (
            self.endpoint.replace("http://", "").replace("https://", "").strip()
        )
        self.region = self.region or None


class CompletedPart(BaseModel):
    """One uploaded part, reported back when completing a multipart upload.

    Attributes:
        part_number: Sequential part number starting at 1
        etag: ETag returned by the storage provider for the uploaded part
    """

    model_config = ConfigDict(populate_by_name=True)

    part_number: int = Field(alias="partNumber", ge=MIN_PART_NUMBER, le=MAX_PART_NUMBER)
    etag: str = Field(alias="eTag")


__all__ = [
    "MinIOConfig",
    "CompletedPart",
]
