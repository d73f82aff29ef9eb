from logging import getLogger
from typing import Optional

from .._config import Config
from .._utils._body import write_request_body
from .._utils._url import merge_url_params
from .._utils.constants import MUTATING_METHODS
from ..models import HttpResponse, RequestOptions
from ._connection import ConnectionConfig, build_connection
from ._response import assemble_response

logger = getLogger(__name__)


def execute_request(
    options: RequestOptions, *, settings: Optional[Config] = None
) -> HttpResponse:
    """Perform one HTTP request and read its response.

    A body is only written for DELETE, PATCH, POST and PUT, and only when
    ``options.data`` is not None; any other method ignores ``data``.

    Args:
        options: The request description.
        settings: Process-wide defaults, ``Config()`` when omitted.

    Returns:
        HttpResponse: Status, collapsed headers, final URL and the body decoded
        according to ``options.response_type``.

    Raises:
        MalformedUrlError: If the URL is not a valid http(s) URL.
        UriSyntaxError: If the URL cannot be split to merge parameters.
        UnsupportedMethodError: If the method is not a supported verb.
        IoFailureError: If the exchange fails on the wire.
        JsonSyntaxError: If a JSON body cannot be parsed.
    """
    url = merge_url_params(options.url, options.params, options.should_encode_params)
    config = ConnectionConfig(
        url=url,
        method=options.method,
        headers=options.headers,
        connect_timeout=options.connect_timeout,
        read_timeout=options.read_timeout,
        disable_redirects=options.disable_redirects,
    )

    with build_connection(config, settings) as connection:
        if options.method in MUTATING_METHODS and options.data is not None:
            write_request_body(connection, options.data)
        elif options.data is not None:
            logger.debug(f"Ignoring request body for {options.method} {url}")

        connection.connect()
        return assemble_response(connection, options.response_type)
