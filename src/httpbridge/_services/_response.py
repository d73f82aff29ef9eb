import base64
import json
import os
import re
from typing import Any, Dict, Iterable, Optional

from .._utils.constants import (
    APPLICATION_JSON,
    APPLICATION_VND_API_JSON,
    DEFAULT_CHARSET,
    HEADER_CONTENT_TYPE,
    UNDEFINED_RESPONSE_TYPE,
)
from ..models.errors import JsonSyntaxError
from ..models.request import ResponseType
from ..models.response import HttpResponse
from ._connection import ManagedConnection

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_stream_as_string(stream: Iterable[bytes]) -> str:
    """Read a byte stream as text, line by line.

    Line breaks are normalized to ``os.linesep`` and a trailing line break
    is dropped.
    """
    text = b"".join(stream).decode(DEFAULT_CHARSET, errors="replace")
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return os.linesep.join(lines)


def read_stream_as_base64(stream: Iterable[bytes]) -> str:
    """Read a byte stream as MIME base64 text (76 character lines)."""
    return base64.encodebytes(b"".join(stream)).decode("ascii")


def parse_json(text: str) -> Any:
    """Parse a JSON response body.

    ``null`` parses to ``None``. The bare literals ``true`` and ``false`` are
    wrapped as ``{"flag": "true"}`` and ``{"flag": "false"}``. Anything else
    must be a JSON object or, failing that, a JSON array.

    >>> parse_json(" true ")
    {'flag': 'true'}
    >>> parse_json("[1, 2]")
    [1, 2]

    Raises:
        JsonSyntaxError: If the body is neither an object nor an array.
    """
    trimmed = text.strip()
    if trimmed == "null":
        return None
    if trimmed == "true":
        return {"flag": "true"}
    if trimmed == "false":
        return {"flag": "false"}

    try:
        value = json.loads(text)
    except ValueError as e:
        raise JsonSyntaxError(text, str(e)) from e

    if isinstance(value, dict):
        return value
    if isinstance(value, list):
        return value
    raise JsonSyntaxError(text, f"got a JSON {type(value).__name__}")


def _is_one_of(content_type: Optional[str], *mime_types: str) -> bool:
    if content_type is None:
        return False
    return any(mime_type in content_type for mime_type in mime_types)


def decode_response_body(
    connection: ManagedConnection, response_type: Optional[ResponseType]
) -> Any:
    """Decode the body of ``connection``.

    An explicit ``response_type`` always wins and reads the input stream.
    Without one, an error body is parsed as JSON when its Content-Type says
    so and returned as text otherwise; a successful JSON body is still
    parsed for older callers. Any other body is left unread and the
    ``"Set Response TYPE !!!"`` marker is returned instead.
    """
    error_stream = connection.get_error_stream()
    content_type = connection.get_header_field(HEADER_CONTENT_TYPE)

    if response_type is not None:
        stream = connection.get_input_stream()
        if response_type in (ResponseType.ARRAY_BUFFER, ResponseType.BLOB):
            return read_stream_as_base64(stream)
        if response_type is ResponseType.JSON:
            return parse_json(read_stream_as_string(stream))
        return read_stream_as_string(stream)

    if error_stream is not None:
        if _is_one_of(content_type, APPLICATION_JSON, APPLICATION_VND_API_JSON):
            return parse_json(read_stream_as_string(error_stream))
        return read_stream_as_string(error_stream)

    if _is_one_of(content_type, APPLICATION_JSON):
        # backward compatibility
        return parse_json(read_stream_as_string(connection.get_input_stream()))

    return UNDEFINED_RESPONSE_TYPE


def build_response_headers(connection: ManagedConnection) -> Dict[str, str]:
    """Collapse repeated response headers into one comma separated value."""
    return {
        name: ", ".join(values)
        for name, values in connection.get_header_fields().items()
    }


def assemble_response(
    connection: ManagedConnection, response_type: Optional[ResponseType]
) -> HttpResponse:
    status = connection.response_code
    headers = build_response_headers(connection)
    url = connection.url
    data = decode_response_body(connection, response_type)

    return HttpResponse(
        status=status,
        headers=headers,
        url=url,
        data=data,
        error=connection.get_error_stream() is not None,
    )
