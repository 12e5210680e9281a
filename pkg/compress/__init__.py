"""
Bounded gzip/JSON payload codec.

Serializes values to JSON, gzips them in a single streaming pass, and
decompresses them back under a hard limit on the decompressed size to guard
against decompression bombs.
"""

from .bounded_reader import BoundedReader
from .compress import GzipJsonCodec, compress, decompress
from .constant import DEFAULT_MAX_DECOMPRESSED_SIZE, GZIP_MAGIC
from .interface import IGzipJson
from .type import BoundedRead, CompressConfig, Decodable, ReadStatus, Target

__all__ = [
    "BoundedReader",
    "BoundedRead",
    "ReadStatus",
    "CompressConfig",
    "Decodable",
    "Target",
    "IGzipJson",
    "GzipJsonCodec",
    "compress",
    "decompress",
    "DEFAULT_MAX_DECOMPRESSED_SIZE",
    "GZIP_MAGIC",
]
