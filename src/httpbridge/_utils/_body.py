import json
from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .constants import (
    APPLICATION_FORM_URLENCODED,
    APPLICATION_JSON,
    HEADER_CONTENT_TYPE,
)

if TYPE_CHECKING:
    from .._services._connection import ManagedConnection


def _as_text(data: Any) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (Mapping, list, tuple)):
        return json.dumps(data).encode("utf-8")
    return str(data).encode("utf-8")


def encode_request_body(
    data: Any, content_type: Optional[str]
) -> Tuple[bytes, Optional[str]]:
    """Serialize a request body according to its declared Content-Type.

    Returns:
        The payload and, when the caller declared none, the Content-Type that
        should be installed for it.
    """
    if not content_type:
        if isinstance(data, (Mapping, list, tuple)):
            return json.dumps(data).encode("utf-8"), APPLICATION_JSON
        return _as_text(data), None

    if APPLICATION_JSON in content_type:
        if isinstance(data, str):
            return data.encode("utf-8"), None
        return json.dumps(data).encode("utf-8"), None

    if APPLICATION_FORM_URLENCODED in content_type and isinstance(data, Mapping):
        return urlencode(data, doseq=True).encode("utf-8"), None

    return _as_text(data), None


def write_request_body(connection: "ManagedConnection", data: Any) -> None:
    """Write ``data`` as the body of ``connection``.

    The output stream is closed exactly once, also when writing fails.
    """
    payload, content_type = encode_request_body(
        data, connection.get_request_property(HEADER_CONTENT_TYPE)
    )
    if content_type is not None:
        connection.set_request_property(HEADER_CONTENT_TYPE, content_type)

    connection.set_do_output(True)
    with connection.get_output_stream() as stream:
        stream.write(payload)
        stream.flush()
