from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import IoFailureError, MalformedUrlError


@contextmanager
def handle_errors(url: str) -> Generator[None, None, None]:
    """Context manager translating httpx failures into httpbridge errors.

    Wraps every call that touches the transport (sending a request, reading
    or closing a response) so callers only ever see the typed failures of
    ``httpbridge.models.errors``.

    Args:
        url: URL of the connection, used in error messages.

    Raises:
        MalformedUrlError: For URLs httpx refuses to send to.
        IoFailureError: For connect, read, write, timeout, decoding and
            redirect failures, and for misuse of an already consumed stream.
    """
    try:
        yield
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        raise MalformedUrlError(url, str(e)) from e
    except httpx.TimeoutException as e:
        raise IoFailureError(f"Timed out talking to {url}: {e}") from e
    except httpx.RequestError as e:
        raise IoFailureError(f"I/O failure talking to {url}: {e}") from e
    except httpx.StreamError as e:
        raise IoFailureError(f"Stream failure on {url}: {e}") from e
