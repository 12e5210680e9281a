# Multipart upload query parameters
QUERY_UPLOAD_ID = "uploadId"
QUERY_PART_NUMBER = "partNumber"

# S3 part number bounds
MIN_PART_NUMBER = 1
MAX_PART_NUMBER = 10000

DEFAULT_PRESIGN_TTL_SECONDS = 900

# Errors
ERROR_CREATE_UPLOAD = "failed to create multipart upload({bucket}/{key})"
ERROR_EMPTY_UPLOAD_ID = "empty upload id({bucket}/{key})"
ERROR_PRESIGN_PART = "failed to presign upload part({bucket}/{key}) part:{part_number}"
ERROR_COMPLETE_UPLOAD = "failed to complete multipart upload({bucket}/{key})"
ERROR_ABORT_UPLOAD = "failed to abort multipart upload({bucket}/{key})"
