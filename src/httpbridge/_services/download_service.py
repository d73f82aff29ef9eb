from logging import getLogger
from pathlib import Path
from typing import Callable, Optional, Union

from .._config import Config
from .._utils._url import merge_url_params
from .._utils.constants import HEADER_CONTENT_LENGTH
from ..models import DownloadOptions, DownloadResult
from ..models.errors import IoFailureError
from ._connection import ConnectionConfig, build_connection

logger = getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def _content_length(value: Optional[str]) -> int:
    try:
        return int(value) if value is not None else 0
    except ValueError:
        return 0


def download_file(
    options: DownloadOptions,
    destination: Union[str, Path],
    on_progress: Optional[ProgressCallback] = None,
    *,
    settings: Optional[Config] = None,
) -> DownloadResult:
    """Stream a response body into ``destination``.

    Query parameters are always percent-encoded. After every chunk written,
    ``on_progress(bytes_so_far, total)`` is called, where ``total`` is the
    Content-Length, or 0 when the server sent none or an unreadable one.

    The destination is truncated before writing; a failure midway leaves a
    partial file behind.

    Args:
        options: The request description (method defaults to GET).
        destination: Where to write the body.
        on_progress: Optional progress callback.
        settings: Process-wide defaults, ``Config()`` when omitted.

    Returns:
        DownloadResult: The absolute path of the written file.

    Raises:
        IoFailureError: If the server answers with an error status or the
            transfer fails.
    """
    settings = settings or Config()
    destination = Path(destination)
    url = merge_url_params(options.url, options.params)
    config = ConnectionConfig(
        url=url,
        method=options.method,
        headers=options.headers,
        connect_timeout=options.connect_timeout,
        read_timeout=options.read_timeout,
    )

    with build_connection(config, settings) as connection:
        stream = connection.get_input_stream(settings.download_chunk_size)
        if connection.get_error_stream() is not None:
            raise IoFailureError(
                f"Download of {url} failed with status {connection.response_code}",
                status_code=connection.response_code,
            )

        total = _content_length(connection.get_header_field(HEADER_CONTENT_LENGTH))
        downloaded = 0

        with open(destination, "wb") as file:
            for chunk in stream:
                if not chunk:
                    continue
                file.write(chunk)
                downloaded += len(chunk)
                if on_progress is not None:
                    on_progress(downloaded, total)

    logger.info(f"Downloaded {downloaded} bytes from {url} to {destination}")
    return DownloadResult(path=str(destination.resolve()))
