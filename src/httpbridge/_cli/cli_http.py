"""HTTP commands: request, download and upload."""

import json

import click

from .._services import HttpService
from ..models import HttpBridgeError, ResponseType
from ._utils._common import parse_headers, parse_params, request_options
from ._utils._formatters import format_output

_RESPONSE_TYPES = click.Choice([t.value for t in ResponseType], case_sensitive=False)


def _parse_data(data):
    if data is None:
        return None
    try:
        return json.loads(data)
    except ValueError:
        return data


@click.command()
@click.argument("url")
@click.option("-X", "--method", default="GET", show_default=True, help="HTTP method")
@request_options
@click.option("-d", "--data", help="Request body; parsed as JSON when possible")
@click.option(
    "--response-type",
    type=_RESPONSE_TYPES,
    default="text",
    show_default=True,
    help="How to interpret the response body",
)
@click.option("--no-encode", is_flag=True, help="Do not percent-encode query parameters")
@click.option("--no-redirects", is_flag=True, help="Do not follow redirects")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "body"]),
    default="json",
    show_default=True,
    help="Print the whole response or its body only",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the output to a file instead of stdout",
)
@click.pass_obj
def request(
    service: HttpService,
    url,
    method,
    headers,
    params,
    connect_timeout,
    read_timeout,
    data,
    response_type,
    no_encode,
    no_redirects,
    fmt,
    output,
):
    r"""Send an HTTP request and print the response.

    \b
    Examples:
        httpbridge request https://example.com/api -p q=search --response-type json
        httpbridge request https://example.com/api -X POST -d '{"k": "v"}'
    """
    call = {
        "url": url,
        "method": method,
        "headers": parse_headers(headers),
        "params": parse_params(params),
        "connectTimeout": connect_timeout,
        "readTimeout": read_timeout,
        "disableRedirects": no_redirects or None,
        "shouldEncodeUrlParams": not no_encode,
        "responseType": response_type,
        "data": _parse_data(data),
    }
    try:
        response = service.request(call)
    except HttpBridgeError as e:
        raise click.ClickException(str(e)) from e
    format_output(response, fmt=fmt, output=output)


@click.command()
@click.argument("url")
@click.argument("destination", type=click.Path(dir_okay=False, writable=True))
@request_options
@click.option("--quiet", is_flag=True, help="Do not report progress")
@click.pass_obj
def download(
    service: HttpService,
    url,
    destination,
    headers,
    params,
    connect_timeout,
    read_timeout,
    quiet,
):
    r"""Download URL into DESTINATION, reporting progress on stderr.

    \b
    Examples:
        httpbridge download https://example.com/file.zip ./file.zip
    """

    def report(downloaded: int, total: int) -> None:
        if total:
            click.echo(f"\r{downloaded}/{total} bytes", err=True, nl=False)
        else:
            click.echo(f"\r{downloaded} bytes", err=True, nl=False)

    call = {
        "url": url,
        "headers": parse_headers(headers),
        "params": parse_params(params),
        "connectTimeout": connect_timeout,
        "readTimeout": read_timeout,
        "filePath": destination,
        "fileDirectory": None,
    }
    try:
        result = service.download_file(call, None if quiet else report)
    except (HttpBridgeError, OSError) as e:
        raise click.ClickException(str(e)) from e
    if not quiet:
        click.echo("", err=True)
    format_output(result)


@click.command()
@click.argument("url")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("-X", "--method", default="POST", show_default=True, help="HTTP method")
@request_options
@click.option(
    "--response-type",
    type=_RESPONSE_TYPES,
    default="text",
    show_default=True,
    help="How to interpret the response body",
)
@click.pass_obj
def upload(
    service: HttpService,
    url,
    source,
    method,
    headers,
    params,
    connect_timeout,
    read_timeout,
    response_type,
):
    r"""Upload SOURCE as the raw body of a request to URL.

    \b
    Examples:
        httpbridge upload https://example.com/upload ./report.pdf -X PUT
    """
    call = {
        "url": url,
        "method": method,
        "headers": parse_headers(headers),
        "params": parse_params(params),
        "connectTimeout": connect_timeout,
        "readTimeout": read_timeout,
        "responseType": response_type,
        "filePath": source,
        "fileDirectory": None,
    }
    try:
        response = service.upload_file(call)
    except (HttpBridgeError, OSError) as e:
        raise click.ClickException(str(e)) from e
    format_output(response)
