import codecs
import gzip
import io
import json
import zlib
from typing import Any, List, Optional, Tuple

from loguru import logger

from core.errors import InternalServerError, InvalidParamsError

from .bounded_reader import BoundedReader
from .constant import *
from .encoder import PayloadEncoder
from .interface import IGzipJson
from .type import CompressConfig, Decodable, ReadStatus

# Errors a gzip reader raises on corrupt, truncated or tampered input
# (gzip.BadGzipFile is an OSError)
_STREAM_ERRORS = (OSError, EOFError, zlib.error)


class GzipJsonCodec(IGzipJson):
    """Bounded gzip/JSON codec.

    Write path: JSON encoder -> gzip writer, streamed chunk by chunk.
    Read path: gzip reader -> bounded reader -> incremental JSON decoder,
    followed by a drain of the same bounded reader so the gzip CRC32/ISIZE
    footer is always verified.
    """

    def __init__(self, config: Optional[CompressConfig] = None):
        """Initialize codec with configuration.

        Args:
            config: Optional CompressConfig, defaults are used when omitted
        """
        self.config = config or CompressConfig()

    def compress(self, data: Any) -> bytes:
        """Serialize data to JSON and gzip it in a single pass.

        Args:
            data: Any JSON-encodable value

        Returns:
            gzip bytes (starting with the 1f 8b magic)

        Raises:
            InvalidParamsError: If data is None
            InternalServerError: If data cannot be encoded or the stream
                cannot be finalized
        """
        if data is None:
            raise InvalidParamsError(ERROR_DATA_NIL)

        buffer = io.BytesIO()
        writer = gzip.GzipFile(
            fileobj=buffer, mode="wb", compresslevel=self.config.level, mtime=0
        )

        # Encoder chunks go straight into the compressor, no full JSON string
        pending: List[str] = []
        pending_size = 0
        try:
            try:
                for chunk in PayloadEncoder().iterencode(data):
                    pending.append(chunk)
                    pending_size += len(chunk)
                    if pending_size >= self.config.chunk_size:
                        writer.write("".join(pending).encode("utf-8"))
                        pending.clear()
                        pending_size = 0
                pending.append("\n")
                writer.write("".join(pending).encode("utf-8"))
            except (TypeError, ValueError, RecursionError) as exc:
                type_name = type(data).__name__
                logger.error(f"JSON encode failed: type={type_name}, error={exc}")
                raise InternalServerError(
                    ERROR_ENCODE_FAILED.format(type_name=type_name), exc
                ) from exc

            # Close flushes buffered bytes and writes the footer
            try:
                writer.close()
            except _STREAM_ERRORS as exc:
                logger.error(f"gzip finalize failed: {exc}")
                raise InternalServerError(ERROR_FINALIZE_FAILED, exc) from exc
        finally:
            # No-op once closed above
            writer.close()

        compressed = buffer.getvalue()
        logger.debug(f"Compressed payload to {len(compressed)} bytes")
        return compressed

    def decompress(
        self, compressed: bytes, out: Decodable, max_uncompressed: int = 0
    ) -> None:
        """Gunzip compressed and decode its JSON value into out.

        Args:
            compressed: gzip bytes produced by compress
            out: Destination populated in place (e.g. Target(MyShape))
            max_uncompressed: Decompressed byte limit; <= 0 uses the
                configured default (4 MiB unless overridden)

        Raises:
            InvalidParamsError: If arguments are missing or the decompressed
                size exceeds the limit
            InternalServerError: If the stream is corrupt, the JSON is
                malformed or the footer does not verify
        """
        if not compressed:
            raise InvalidParamsError(ERROR_COMPRESSED_EMPTY)

        if out is None:
            raise InvalidParamsError(ERROR_OUTPUT_NIL)

        limit = max_uncompressed
        if limit <= 0:
            limit = self.config.max_decompressed_size

        with gzip.GzipFile(fileobj=io.BytesIO(compressed), mode="rb") as reader:
            # Force the header to be parsed before any decoding
            try:
                reader.peek(1)
            except _STREAM_ERRORS as exc:
                logger.warning(f"Rejected non-gzip payload: {exc}")
                raise InternalServerError(ERROR_CREATE_DECOMPRESSOR, exc) from exc

            bounded = BoundedReader(reader, limit)
            value = self._decode(bounded, limit)
            self._drain(bounded, limit)

        # Destination is only touched once the whole stream verified
        try:
            out.decode_json(value)
        except Exception as exc:
            logger.warning(f"Decoded JSON rejected by destination: {exc!r}")
            raise InternalServerError(ERROR_DECODE_FAILED, exc) from exc

    def _decode(self, reader: BoundedReader, limit: int) -> Any:
        """Read from reader until one complete JSON value is buffered."""
        decoder = json.JSONDecoder()
        utf8 = codecs.getincrementaldecoder("utf-8")()
        text = ""
        next_attempt = 0

        while True:
            try:
                result = reader.read(self.config.chunk_size)
            except _STREAM_ERRORS as exc:
                # A complete value already buffered means only the footer is bad
                if self._parse(decoder, text) is not None:
                    logger.warning(f"gzip footer verification failed: {exc}")
                    raise InternalServerError(ERROR_VERIFY_FAILED, exc) from exc
                logger.warning(f"gzip stream failed during decode: {exc}")
                raise InternalServerError(ERROR_DECODE_FAILED, exc) from exc

            if result.status is ReadStatus.LIMIT:
                raise self._limit_error(limit)

            eof = result.status is ReadStatus.EOF
            try:
                text += utf8.decode(result.data, final=eof)
            except UnicodeDecodeError as exc:
                raise InternalServerError(ERROR_DECODE_FAILED, exc) from exc

            # Parse attempts back off geometrically to stay linear overall
            if not eof and len(text) < next_attempt:
                continue

            start = len(text) - len(text.lstrip(JSON_WHITESPACE))
            if start == len(text):
                if eof:
                    raise InternalServerError(
                        ERROR_DECODE_FAILED, EOFError(ERROR_UNEXPECTED_END)
                    )
                next_attempt = 2 * len(text)
                continue

            # Nesting too deep and oversized integers raise outside JSONDecodeError
            try:
                value, end = decoder.raw_decode(text, start)
            except (ValueError, RecursionError) as exc:
                if eof:
                    raise InternalServerError(ERROR_DECODE_FAILED, exc) from exc
                next_attempt = 2 * len(text)
                continue

            # A number may continue in the next chunk
            if end == len(text) and not eof:
                next_attempt = len(text) + 1
                continue

            return value

    @staticmethod
    def _parse(decoder: json.JSONDecoder, text: str) -> Optional[Tuple[Any, int]]:
        """Return (value, end) when text holds a complete JSON value, else None."""
        start = len(text) - len(text.lstrip(JSON_WHITESPACE))
        if start == len(text):
            return None
        try:
            return decoder.raw_decode(text, start)
        except (ValueError, RecursionError):
            return None

    def _drain(self, reader: BoundedReader, limit: int) -> None:
        """Read the rest of the stream so gzip verifies its footer."""
        while True:
            try:
                result = reader.read(self.config.chunk_size)
            except _STREAM_ERRORS as exc:
                logger.warning(f"gzip footer verification failed: {exc}")
                raise InternalServerError(ERROR_VERIFY_FAILED, exc) from exc

            if result.status is ReadStatus.EOF:
                return
            if result.status is ReadStatus.LIMIT:
                raise self._limit_error(limit)

    @staticmethod
    def _limit_error(limit: int) -> InvalidParamsError:
        logger.info(f"Decompressed payload exceeds limit of {limit} bytes")
        return InvalidParamsError(ERROR_SIZE_LIMIT.format(limit=limit))


_default_codec = GzipJsonCodec()


def compress(data: Any) -> bytes:
    """Compress data with the default codec configuration."""
    return _default_codec.compress(data)


def decompress(compressed: bytes, out: Decodable, max_uncompressed: int = 0) -> None:
    """Decompress into out with the default codec configuration."""
    _default_codec.decompress(compressed, out, max_uncompressed)


__all__ = [
    "GzipJsonCodec",
    "compress",
    "decompress",
]
