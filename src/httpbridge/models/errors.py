from typing import Optional


class HttpBridgeError(Exception):
    """Base class for every failure raised by httpbridge."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MalformedUrlError(HttpBridgeError):
    """Raised when a URL, before or after parameter merging, is not a usable HTTP URL."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        message = f"Malformed URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UriSyntaxError(HttpBridgeError):
    """Raised when the base URL cannot be split into URI components."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Invalid URI syntax in {url!r}: {reason}")


class UnsupportedMethodError(HttpBridgeError):
    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unsupported HTTP method: {method!r}")


class IoFailureError(HttpBridgeError):
    """Raised for any connect, read, write or close failure on a connection.

    ``status_code`` is set when the failure stems from an HTTP error status
    (for example a download answered with 404).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class JsonSyntaxError(HttpBridgeError):
    """Raised when a body expected to be JSON is neither an object nor an array."""

    def __init__(self, doc: str, reason: str):
        self.doc = doc
        super().__init__(f"Response body is not a JSON object or array: {reason}")
