import httpx
import pytest

from httpbridge._utils._errors import handle_errors
from httpbridge.models.errors import IoFailureError, MalformedUrlError

URL = "http://example.test/resource"


class TestHandleErrors:
    def test_passes_through_without_errors(self):
        with handle_errors(URL):
            value = 1
        assert value == 1

    def test_invalid_url_becomes_malformed_url(self):
        with pytest.raises(MalformedUrlError) as exc_info:
            with handle_errors(URL):
                raise httpx.InvalidURL("bad")
        assert exc_info.value.url == URL

    def test_unsupported_protocol_becomes_malformed_url(self):
        with pytest.raises(MalformedUrlError):
            with handle_errors(URL):
                raise httpx.UnsupportedProtocol("nope")

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("refused"),
            httpx.ReadError("reset"),
            httpx.WriteError("broken pipe"),
            httpx.RemoteProtocolError("garbage"),
            httpx.TooManyRedirects("loop"),
        ],
    )
    def test_request_errors_become_io_failures(self, error: Exception):
        with pytest.raises(IoFailureError) as exc_info:
            with handle_errors(URL):
                raise error
        assert exc_info.value.__cause__ is error
        assert URL in exc_info.value.message

    def test_timeouts_become_io_failures(self):
        with pytest.raises(IoFailureError, match="Timed out"):
            with handle_errors(URL):
                raise httpx.ReadTimeout("slow")

    def test_stream_errors_become_io_failures(self):
        with pytest.raises(IoFailureError, match="Stream failure"):
            with handle_errors(URL):
                raise httpx.StreamClosed()

    def test_other_errors_propagate_unchanged(self):
        with pytest.raises(KeyError):
            with handle_errors(URL):
                raise KeyError("x")
