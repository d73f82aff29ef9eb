from typing import Dict, Iterable, List, Union

import click


def parse_headers(values: Iterable[str]) -> Dict[str, str]:
    """Parse ``Name: value`` pairs given with ``-H``."""
    headers: Dict[str, str] = {}
    for value in values:
        name, sep, header_value = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"expected 'Name: value', got {value!r}", param_hint="'-H'"
            )
        headers[name.strip()] = header_value.strip()
    return headers


def parse_params(values: Iterable[str]) -> Dict[str, Union[str, List[str]]]:
    """Parse ``key=value`` pairs given with ``-p``; repeated keys become lists."""
    params: Dict[str, Union[str, List[str]]] = {}
    for value in values:
        key, sep, param_value = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"expected 'key=value', got {value!r}", param_hint="'-p'"
            )
        existing = params.get(key)
        if existing is None:
            params[key] = param_value
        elif isinstance(existing, list):
            existing.append(param_value)
        else:
            params[key] = [existing, param_value]
    return params


def request_options(function):
    """Options shared by every command that talks to a server."""
    function = click.option(
        "--read-timeout",
        type=click.IntRange(min=0),
        help="Read timeout in milliseconds (0 waits forever)",
    )(function)
    function = click.option(
        "--connect-timeout",
        type=click.IntRange(min=0),
        help="Connect timeout in milliseconds (0 waits forever)",
    )(function)
    function = click.option(
        "-p",
        "--param",
        "params",
        multiple=True,
        help="Query parameter as key=value; repeat a key for a list",
    )(function)
    function = click.option(
        "-H",
        "--header",
        "headers",
        multiple=True,
        help="Request header as 'Name: value'",
    )(function)
    return function
