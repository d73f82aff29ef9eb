from typing import Any, List, Mapping, Optional
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from ..models.errors import MalformedUrlError, UriSyntaxError

# Characters legal in a URI query component that are kept as-is when encoding.
# "%" is not among them, so pre-encoded values are encoded again.
_QUERY_SAFE = ";/?:@&=+$,[]!*'()"
_HTTP_SCHEMES = ("http", "https")


def parse_url(url: str) -> SplitResult:
    """Split ``url`` and check that it is an absolute http(s) URL.

    >>> parse_url("https://example.com/a?b=c").netloc
    'example.com'

    Raises:
        MalformedUrlError: If the URL cannot be parsed, is not http(s) or has no host.
    """
    try:
        parts = urlsplit(url)
        # accessing the port validates it
        parts.port
    except (TypeError, ValueError) as e:
        raise MalformedUrlError(str(url), str(e)) from e

    if parts.scheme.lower() not in _HTTP_SCHEMES:
        raise MalformedUrlError(url, "expected an http or https URL")
    if not parts.hostname:
        raise MalformedUrlError(url, "missing host")
    return parts


def _query_pairs(key: str, value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [f"{key}={item}" for item in value]
    return [f"{key}={value}"]


def merge_url_params(
    url: str,
    params: Optional[Mapping[str, Any]],
    should_encode: bool = True,
) -> str:
    """Append ``params`` to the query string of ``url``.

    The existing query is kept verbatim as a prefix; it is never parsed or
    deduplicated. Sequence values expand to one ``key=value`` pair per item,
    in order. Keys are visited in the mapping's iteration order.

    With ``should_encode`` the merged query is percent-encoded; without it the
    URL is rebuilt by plain concatenation and callers own any encoding.

    >>> merge_url_params("http://x/y?z=1", {"a": "b c"})
    'http://x/y?z=1&a=b%20c'
    >>> merge_url_params("http://x/y", {"a": ["1", "2"]})
    'http://x/y?a=1&a=2'
    >>> merge_url_params("http://x/y", {"a": "b c"}, should_encode=False)
    'http://x/y?a=b c'

    Raises:
        UriSyntaxError: If ``url`` cannot be split into URI components.
        MalformedUrlError: If the merged URL is not a valid http(s) URL.
    """
    if not params:
        return url

    try:
        parts = urlsplit(url)
    except (TypeError, ValueError) as e:
        raise UriSyntaxError(str(url), str(e)) from e

    pairs: List[str] = [parts.query] if parts.query else []
    for key, value in params.items():
        pairs.extend(_query_pairs(key, value))
    query = "&".join(pairs)

    if should_encode:
        merged = urlunsplit(
            (
                parts.scheme,
                parts.netloc,
                parts.path,
                quote(query, safe=_QUERY_SAFE),
                parts.fragment,
            )
        )
    else:
        merged = f"{parts.scheme}://{parts.netloc}{parts.path}"
        if query:
            merged += f"?{query}"
        if parts.fragment:
            merged += f"#{parts.fragment}"

    parse_url(merged)
    return merged
