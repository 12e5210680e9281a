"""Interface for object storage multipart upload operations."""

from datetime import timedelta
from typing import List, Protocol, runtime_checkable

from .type import CompletedPart


@runtime_checkable
class IMultipartUpload(Protocol):
    """Protocol for multipart uploads driven by presigned part URLs.

    Every method raises StorageError on transport or provider failure.
    """

    def create_upload(self, bucket: str, key: str) -> str:
        """Start a multipart upload and return its upload id."""
        ...

    def presign_part(
        self,
        bucket: str,
        key: str,
        upload_id: str,
        part_number: int,
        expires: timedelta,
    ) -> str:
        """Return a presigned PUT URL for one part."""
        ...

    def complete_upload(
        self, bucket: str, key: str, upload_id: str, parts: List[CompletedPart]
    ) -> None:
        """Assemble the uploaded parts into the final object."""
        ...

    def abort_upload(self, bucket: str, key: str, upload_id: str) -> None:
        """Cancel an upload and discard its parts."""
        ...


__all__ = ["IMultipartUpload"]
