# Environment variables
ENV_TIMEOUT = "HTTPBRIDGE_TIMEOUT"
ENV_DOCUMENTS_DIR = "HTTPBRIDGE_DOCUMENTS_DIR"
ENV_DATA_DIR = "HTTPBRIDGE_DATA_DIR"
ENV_CACHE_DIR = "HTTPBRIDGE_CACHE_DIR"
ENV_EXTERNAL_DIR = "HTTPBRIDGE_EXTERNAL_DIR"
ENV_DISABLE_SSL_VERIFY = "HTTPBRIDGE_DISABLE_SSL_VERIFY"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"

# Content types
APPLICATION_JSON = "application/json"
APPLICATION_VND_API_JSON = "application/vnd.api+json"
APPLICATION_FORM_URLENCODED = "application/x-www-form-urlencoded"
APPLICATION_OCTET_STREAM = "application/octet-stream"

# HTTP methods
SUPPORTED_METHODS = frozenset(
    ["GET", "POST", "HEAD", "OPTIONS", "PUT", "DELETE", "TRACE", "PATCH"]
)
MUTATING_METHODS = frozenset(["DELETE", "PATCH", "POST", "PUT"])

# Response decoding
DEFAULT_CHARSET = "utf-8"
UNDEFINED_RESPONSE_TYPE = "Set Response TYPE !!!"

# Defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_DOWNLOAD_CHUNK_SIZE = 1024
DEFAULT_UPLOAD_CHUNK_SIZE = 4096
DEFAULT_SPOOL_MAX_SIZE = 1024 * 1024
DEFAULT_FILE_DIRECTORY = "DOCUMENTS"
DEFAULT_UPLOAD_FIELD_NAME = "file"
