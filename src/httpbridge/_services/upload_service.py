from logging import getLogger
from pathlib import Path
from typing import Optional, Union

from .._config import Config
from .._utils._url import merge_url_params
from .._utils.constants import APPLICATION_OCTET_STREAM, HEADER_CONTENT_TYPE
from ..models import HttpResponse, UploadOptions
from ._connection import ConnectionConfig, build_connection
from ._response import assemble_response

logger = getLogger(__name__)


def upload_file(
    options: UploadOptions,
    source: Union[str, Path],
    *,
    settings: Optional[Config] = None,
) -> HttpResponse:
    """Send the bytes of ``source`` as the raw request body.

    The Content-Type is always ``application/octet-stream``, replacing any
    caller supplied one. No multipart framing is produced: ``options.name``
    and ``options.data`` are not part of the request.

    Args:
        options: The request description (method defaults to POST).
        source: The file to send.
        settings: Process-wide defaults, ``Config()`` when omitted.

    Returns:
        HttpResponse: The response, decoded according to ``options.response_type``.

    Raises:
        FileNotFoundError: If ``source`` does not exist.
        PermissionError: If ``source`` cannot be read.
        IoFailureError: If the exchange fails on the wire.
    """
    settings = settings or Config()
    url = merge_url_params(options.url, options.params)
    config = ConnectionConfig(
        url=url,
        method=options.method,
        headers=options.headers,
        connect_timeout=options.connect_timeout,
        read_timeout=options.read_timeout,
    )

    with build_connection(config, settings) as connection:
        connection.set_do_output(True)
        connection.set_request_property(HEADER_CONTENT_TYPE, APPLICATION_OCTET_STREAM)
        logger.debug(
            f"Uploading {source} as raw body; field name {options.name!r} is not sent"
        )

        with connection.get_output_stream() as stream:
            with open(source, "rb") as file:
                while chunk := file.read(settings.upload_chunk_size):
                    stream.write(chunk)
            stream.flush()

        connection.connect()
        response = assemble_response(connection, options.response_type)

    logger.info(f"Uploaded {source} to {url}: status {response.status}")
    return response
