from ._body import encode_request_body, write_request_body
from ._errors import handle_errors
from ._logs import setup_logging
from ._url import merge_url_params, parse_url

__all__ = [
    "encode_request_body",
    "handle_errors",
    "merge_url_params",
    "parse_url",
    "setup_logging",
    "write_request_body",
]
