"""Interface for gzip/JSON payload codec operations."""

from typing import Any, Protocol, runtime_checkable

from .type import Decodable


@runtime_checkable
class IGzipJson(Protocol):
    """Protocol for bounded compress/decompress operations.

    Implementations are stateless and safe for concurrent use.
    """

    def compress(self, data: Any) -> bytes:
        """Serialize data to JSON and gzip it."""
        ...

    def decompress(
        self, compressed: bytes, out: Decodable, max_uncompressed: int = 0
    ) -> None:
        """Gunzip and decode JSON into out, bounded by max_uncompressed bytes."""
        ...


__all__ = ["IGzipJson"]
