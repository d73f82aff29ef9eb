from ._connection import (
    ConnectionConfig,
    ManagedConnection,
    RequestBodyStream,
    build_connection,
)
from ._response import assemble_response, decode_response_body, parse_json
from .download_service import download_file
from .http_service import HttpService
from .request_service import execute_request
from .upload_service import upload_file

__all__ = [
    "ConnectionConfig",
    "HttpService",
    "ManagedConnection",
    "RequestBodyStream",
    "assemble_response",
    "build_connection",
    "decode_response_body",
    "download_file",
    "execute_request",
    "parse_json",
    "upload_file",
]
