"""HTTP request/response engine for host bridges.

Turns a "make an HTTP call with these options" description into one
connection-level exchange, including streamed file downloads with progress
reporting and raw-body file uploads.
"""

from ._config import Config
from ._services import (
    HttpService,
    download_file,
    execute_request,
    upload_file,
)
from ._utils import merge_url_params, setup_logging
from .models import (
    DownloadOptions,
    DownloadResult,
    HttpBridgeError,
    HttpResponse,
    IoFailureError,
    JsonSyntaxError,
    MalformedUrlError,
    RequestOptions,
    ResponseType,
    UnsupportedMethodError,
    UploadOptions,
    UriSyntaxError,
)

__all__ = [
    "Config",
    "DownloadOptions",
    "DownloadResult",
    "HttpBridgeError",
    "HttpResponse",
    "HttpService",
    "IoFailureError",
    "JsonSyntaxError",
    "MalformedUrlError",
    "RequestOptions",
    "ResponseType",
    "UnsupportedMethodError",
    "UploadOptions",
    "UriSyntaxError",
    "download_file",
    "execute_request",
    "merge_url_params",
    "setup_logging",
]
