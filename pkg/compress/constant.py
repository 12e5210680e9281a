GZIP_MAGIC = b"\x1f\x8b"

# Compression levels (gzip native)
MIN_LEVEL = 1
MAX_LEVEL = 9
DEFAULT_LEVEL = 6

# Maximum size after decompression (4 MiB)
DEFAULT_MAX_DECOMPRESSED_SIZE = 4 * 1024 * 1024
DEFAULT_CHUNK_SIZE = 64 * 1024
JSON_WHITESPACE = " \t\n\r"

# Errors
ERROR_DATA_NIL = "data cannot be nil"
ERROR_COMPRESSED_EMPTY = "compressed data cannot be empty"
ERROR_OUTPUT_NIL = "output cannot be nil"
ERROR_ENCODE_FAILED = "failed to encode JSON (type:{type_name})"
ERROR_FINALIZE_FAILED = "failed to finalize compression"
ERROR_CREATE_DECOMPRESSOR = "failed to create decompressor"
ERROR_SIZE_LIMIT = "decompressed size exceeds limit: {limit} bytes"
ERROR_DECODE_FAILED = "failed to decode JSON"
ERROR_UNEXPECTED_END = "unexpected end of JSON input"
ERROR_VERIFY_FAILED = "failed to verify complete stream"
ERROR_INVALID_LEVEL = "Invalid compression level: {level}. Must be 1-9."
ERROR_CHUNK_SIZE_POSITIVE = "chunk_size must be positive, got {size}"
ERROR_READ_SIZE_POSITIVE = "read size must be positive, got {size}"
