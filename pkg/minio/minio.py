from __future__ import annotations

from datetime import timedelta
from typing import List

from minio import Minio  # type: ignore
from minio.datatypes import Part  # type: ignore

from loguru import logger
from core.errors import StorageError
from .interface import IMultipartUpload
from .type import MinIOConfig, CompletedPart
from .constant import *


class MinioMultipartUploader(IMultipartUpload):
    """Thin wrapper around the MinIO client for presigned multipart uploads.

    The server side only starts, completes and aborts uploads; clients PUT
    each part directly to the presigned URL.

    The multipart primitives (_create/_complete/_abort_multipart_upload) are
    private client methods; minio is pinned below 8.

    Attributes:
        config: MinIO configuration
    """

    def __init__(self, config: MinIOConfig):
        """Initialize uploader with configuration.

        Args:
            config: MinIO configuration
        """
        self.config = config

        self._client = Minio(
            self.config.endpoint,
            access_key=self.config.access_key,
            secret_key=self.config.secret_key,
            secure=self.config.secure,
            region=self.config.region,
        )

    def create_upload(self, bucket: str, key: str) -> str:
        """Start a multipart upload.

        Args:
            bucket: Bucket name
            key: Object key

        Returns:
            Upload id assigned by the provider

        Raises:
            StorageError: If the upload cannot be created
        """
        try:
            upload_id = self._client._create_multipart_upload(bucket, key, {})
        except Exception as exc:
            logger.error(f"Failed to create multipart upload: {exc}")
            raise StorageError(
                ERROR_CREATE_UPLOAD.format(bucket=bucket, key=key), exc
            ) from exc

        if not upload_id:
            raise StorageError(ERROR_EMPTY_UPLOAD_ID.format(bucket=bucket, key=key))

        logger.info(f"Created multipart upload bucket={bucket}, key={key}")
        return upload_id

    def presign_part(
        self,
        bucket: str,
        key: str,
        upload_id: str,
        part_number: int,
        expires: timedelta = timedelta(seconds=DEFAULT_PRESIGN_TTL_SECONDS),
    ) -> str:
        """Issue a presigned PUT URL for one part.

        Args:
            bucket: Bucket name
            key: Object key
            upload_id: Id returned by create_upload
            part_number: Part number (1-10000)
            expires: URL lifetime

        Returns:
            Presigned URL

        Raises:
            StorageError: If the URL cannot be issued
        """
        message = ERROR_PRESIGN_PART.format(
            bucket=bucket, key=key, part_number=part_number
        )
        if not MIN_PART_NUMBER <= part_number <= MAX_PART_NUMBER:
            raise StorageError(
                message, ValueError(f"part number out of range: {part_number}")
            )
        if not upload_id:
            raise StorageError(message, ValueError("upload id cannot be empty"))

        try:
            return self._client.get_presigned_url(
                "PUT",
                bucket,
                key,
                expires=expires,
                extra_query_params={
                    QUERY_UPLOAD_ID: upload_id,
                    QUERY_PART_NUMBER: str(part_number),
                },
            )
        except Exception as exc:
            logger.error(f"Failed to presign upload part: {exc}")
            raise StorageError(message, exc) from exc

    def complete_upload(
        self, bucket: str, key: str, upload_id: str, parts: List[CompletedPart]
    ) -> None:
        """Complete a multipart upload.

        Args:
            bucket: Bucket name
            key: Object key
            upload_id: Id returned by create_upload
            parts: Uploaded parts with their ETags

        Raises:
            StorageError: If the provider rejects the completion
        """
        message = ERROR_COMPLETE_UPLOAD.format(bucket=bucket, key=key)
        if not parts:
            raise StorageError(message, ValueError("parts cannot be empty"))

        ordered = sorted(parts, key=lambda p: p.part_number)
        try:
            self._client._complete_multipart_upload(
                bucket,
                key,
                upload_id,
                [Part(p.part_number, p.etag) for p in ordered],
            )
        except Exception as exc:
            logger.error(f"Failed to complete multipart upload: {exc}")
            raise StorageError(message, exc) from exc

        logger.info(
            f"Completed multipart upload bucket={bucket}, key={key}, parts={len(ordered)}"
        )

    def abort_upload(self, bucket: str, key: str, upload_id: str) -> None:
        """Abort a multipart upload.

        Args:
            bucket: Bucket name
            key: Object key
            upload_id: Id returned by create_upload

        Raises:
            StorageError: If the provider rejects the abort
        """
        try:
            self._client._abort_multipart_upload(bucket, key, upload_id)
        except Exception as exc:
            logger.error(f"Failed to abort multipart upload: {exc}")
            raise StorageError(
                ERROR_ABORT_UPLOAD.format(bucket=bucket, key=key), exc
            ) from exc

        logger.info(f"Aborted multipart upload bucket={bucket}, key={key}")


__all__ = [
    "MinioMultipartUploader",
]
