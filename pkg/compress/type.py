from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import TypeAdapter

from .constant import *

T = TypeVar("T")


@dataclass
class CompressConfig:
    """Gzip/JSON codec configuration.

    Attributes:
        level: gzip compression level (1-9)
        max_decompressed_size: Limit applied when a caller passes a limit <= 0
        chunk_size: Bytes requested per read while decoding and draining
    """

    level: int = DEFAULT_LEVEL
    max_decompressed_size: int = DEFAULT_MAX_DECOMPRESSED_SIZE
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate configuration."""
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(ERROR_INVALID_LEVEL.format(level=self.level))

        if self.chunk_size <= 0:
            raise ValueError(ERROR_CHUNK_SIZE_POSITIVE.format(size=self.chunk_size))

        # A non-positive limit never means "unlimited"
        if self.max_decompressed_size <= 0:
            self.max_decompressed_size = DEFAULT_MAX_DECOMPRESSED_SIZE


class ReadStatus(str, Enum):
    """Outcome of a single bounded read."""

    DATA = "data"
    EOF = "eof"
    LIMIT = "limit"


@dataclass(frozen=True)
class BoundedRead:
    """Result of BoundedReader.read.

    Attributes:
        status: DATA when bytes were produced, EOF when the source ended,
            LIMIT when the byte budget ran out with source bytes left over
        data: Bytes produced (empty unless status is DATA)
    """

    status: ReadStatus
    data: bytes = b""


@runtime_checkable
class Decodable(Protocol):
    """Destination populated in place by decompress."""

    def decode_json(self, value: Any) -> None:
        """Populate the destination from a decoded JSON value."""
        ...


class Target(Generic[T]):
    """Decode destination for a value of a known shape.

    The shape is anything pydantic can validate: builtins (``str``,
    ``dict[str, int]``), dataclasses, TypedDicts or BaseModel subclasses.

    Usage:
        out = Target(User)
        decompress(blob, out)
        user = out.value
    """

    def __init__(self, shape: Any):
        self.shape = shape
        self.value: Optional[T] = None
        self._adapter = TypeAdapter(shape)

    def decode_json(self, value: Any) -> None:
        """Validate value against the shape and store it.

        Raises:
            pydantic.ValidationError: If value does not match the shape
        """
        self.value = self._adapter.validate_python(value)

    def __repr__(self) -> str:
        return f"Target(shape={self.shape!r}, value={self.value!r})"


__all__ = [
    "CompressConfig",
    "ReadStatus",
    "BoundedRead",
    "Decodable",
    "Target",
]
