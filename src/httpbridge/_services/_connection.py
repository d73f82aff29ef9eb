import tempfile
from dataclasses import dataclass, field
from logging import getLogger
from typing import Any, Dict, Iterator, List, Mapping, Optional

import httpx

from .._config import Config
from .._utils._errors import handle_errors
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils._url import parse_url
from .._utils.constants import HEADER_CONTENT_LENGTH, SUPPORTED_METHODS
from ..models.errors import IoFailureError, UnsupportedMethodError

logger = getLogger(__name__)


@dataclass(frozen=True)
class ConnectionConfig:
    """Everything needed to open one connection.

    Timeouts are in milliseconds; ``None`` keeps the configured default and
    ``0`` waits forever.
    """

    url: str
    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    connect_timeout: Optional[int] = None
    read_timeout: Optional[int] = None
    disable_redirects: Optional[bool] = None


class RequestBodyStream:
    """Write side of a request body.

    Bytes are buffered in a spooled temporary file and streamed to the
    server once the connection connects. Closing finishes the body; it
    happens once, later calls are no-ops.
    """

    def __init__(self, max_size: int) -> None:
        self._buffer = tempfile.SpooledTemporaryFile(max_size=max_size)
        self._size = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def size(self) -> int:
        return self._size

    def write(self, data: bytes) -> int:
        if self._closed:
            raise IoFailureError("Cannot write to a closed request body")
        self._buffer.write(data)
        self._size += len(data)
        return len(data)

    def flush(self) -> None:
        if self._closed:
            raise IoFailureError("Cannot flush a closed request body")
        self._buffer.flush()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._buffer.flush()

    def iter_chunks(self, chunk_size: int) -> Iterator[bytes]:
        self._buffer.seek(0)
        while chunk := self._buffer.read(chunk_size):
            yield chunk

    def release(self) -> None:
        self._buffer.close()

    def __enter__(self) -> "RequestBodyStream":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class _ReplayableContent:
    """Request content httpx can iterate again, as it does when following a 307 or 308."""

    def __init__(self, body: RequestBodyStream, chunk_size: int) -> None:
        self._body = body
        self._chunk_size = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        return self._body.iter_chunks(self._chunk_size)


class ManagedConnection:
    """One HTTP exchange over its own httpx client.

    Request properties and the request body can be set until the
    connection connects; response accessors connect on first use. The
    connection is request-scoped: close it (or use it as a context manager)
    once the response has been read.
    """

    def __init__(
        self,
        client: httpx.Client,
        config: ConnectionConfig,
        spool_max_size: int,
        chunk_size: int,
    ) -> None:
        self._client = client
        self._method = config.method
        self._url = config.url
        self._request_headers = httpx.Headers()
        for name, value in config.headers.items():
            self._request_headers[name] = value
        self._spool_max_size = spool_max_size
        self._chunk_size = chunk_size

        self._do_output = False
        self._body: Optional[RequestBodyStream] = None
        self._response: Optional[httpx.Response] = None
        self._closed = False

    @property
    def method(self) -> str:
        return self._method

    @property
    def url(self) -> str:
        """The request URL, or the final URL after redirects once connected."""
        if self._response is not None:
            return str(self._response.url)
        return self._url

    @property
    def connected(self) -> bool:
        return self._response is not None

    @property
    def do_output(self) -> bool:
        return self._do_output

    def set_do_output(self, do_output: bool) -> None:
        self._ensure_not_connected()
        self._do_output = do_output

    def get_request_property(self, name: str) -> Optional[str]:
        return self._request_headers.get(name)

    def set_request_property(self, name: str, value: str) -> None:
        self._ensure_not_connected()
        self._request_headers[name] = value

    def get_output_stream(self) -> RequestBodyStream:
        if not self._do_output:
            raise IoFailureError(
                f"{self._method} {self._url}: request body output is not enabled"
            )
        self._ensure_not_connected()
        if self._body is None:
            self._body = RequestBodyStream(self._spool_max_size)
        return self._body

    def connect(self) -> None:
        if self._response is not None:
            return
        if self._closed:
            raise IoFailureError(f"Connection to {self._url} is closed")

        headers = self._request_headers.copy()
        content = None
        if self._body is not None:
            self._body.close()
            headers[HEADER_CONTENT_LENGTH] = str(self._body.size)
            content = _ReplayableContent(self._body, self._chunk_size)

        logger.debug(f"Request: {self._method} {self._url}")
        logger.debug(f"HEADERS: {dict(headers)}")

        with handle_errors(self._url):
            request = self._client.build_request(
                self._method, self._url, headers=headers, content=content
            )
            self._response = self._client.send(request, stream=True)

        logger.debug(f"Response: {self._response.status_code} {self._response.url}")

    @property
    def response(self) -> httpx.Response:
        self.connect()
        assert self._response is not None
        return self._response

    @property
    def response_code(self) -> int:
        return self.response.status_code

    def get_header_field(self, name: str) -> Optional[str]:
        return self.response.headers.get(name)

    def get_header_fields(self) -> Dict[str, List[str]]:
        """Response headers keyed by their name as received, in arrival order."""
        headers = self.response.headers
        fields: Dict[str, List[str]] = {}
        for raw_name, raw_value in headers.raw:
            name = raw_name.decode(headers.encoding)
            fields.setdefault(name, []).append(raw_value.decode(headers.encoding))
        return fields

    def get_input_stream(self, chunk_size: Optional[int] = None) -> Iterator[bytes]:
        response = self.response
        return self._iter_body(response, chunk_size or self._chunk_size)

    def get_error_stream(
        self, chunk_size: Optional[int] = None
    ) -> Optional[Iterator[bytes]]:
        """The response body when the server answered with an error status."""
        response = self.response
        if response.status_code < 400:
            return None
        return self._iter_body(response, chunk_size or self._chunk_size)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            if self._response is not None:
                with handle_errors(self._url):
                    self._response.close()
        finally:
            if self._body is not None:
                self._body.release()
            self._client.close()

    def __enter__(self) -> "ManagedConnection":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _iter_body(self, response: httpx.Response, chunk_size: int) -> Iterator[bytes]:
        with handle_errors(self._url):
            yield from response.iter_bytes(chunk_size)

    def _ensure_not_connected(self) -> None:
        if self._response is not None:
            raise IoFailureError(f"Connection to {self._url} is already connected")


def _seconds(milliseconds: int) -> Optional[float]:
    # 0 means no timeout at all
    if milliseconds == 0:
        return None
    return milliseconds / 1000


def build_connection(
    config: ConnectionConfig, settings: Optional[Config] = None
) -> ManagedConnection:
    """Open a configured, not yet connected connection.

    Timeouts and redirect suppression are applied only when set; headers are
    installed verbatim, a later header with the same name replacing an
    earlier one.

    Raises:
        UnsupportedMethodError: If ``config.method`` is not a supported verb.
        MalformedUrlError: If ``config.url`` is not an absolute http(s) URL.
    """
    settings = settings or Config()

    if config.method not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(config.method)
    parse_url(config.url)

    timeout_kwargs: Dict[str, Optional[float]] = {}
    if config.connect_timeout is not None:
        timeout_kwargs["connect"] = _seconds(config.connect_timeout)
    if config.read_timeout is not None:
        timeout_kwargs["read"] = _seconds(config.read_timeout)

    client_kwargs = get_httpx_client_kwargs()
    client_kwargs["timeout"] = httpx.Timeout(settings.timeout, **timeout_kwargs)
    if config.disable_redirects:
        client_kwargs["follow_redirects"] = False

    return ManagedConnection(
        httpx.Client(**client_kwargs),
        config,
        spool_max_size=settings.spool_max_size,
        chunk_size=settings.upload_chunk_size,
    )
