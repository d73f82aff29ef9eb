from .errors import (
    HttpBridgeError,
    IoFailureError,
    JsonSyntaxError,
    MalformedUrlError,
    UnsupportedMethodError,
    UriSyntaxError,
)
from .request import DownloadOptions, RequestOptions, ResponseType, UploadOptions
from .response import DownloadResult, HttpResponse

__all__ = [
    "DownloadOptions",
    "DownloadResult",
    "HttpBridgeError",
    "HttpResponse",
    "IoFailureError",
    "JsonSyntaxError",
    "MalformedUrlError",
    "RequestOptions",
    "ResponseType",
    "UnsupportedMethodError",
    "UploadOptions",
    "UriSyntaxError",
]
