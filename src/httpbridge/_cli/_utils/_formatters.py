"""Output formatting for CLI commands."""

import json
from pathlib import Path
from typing import Any, Optional

import click


def format_output(data: Any, fmt: str = "json", output: Optional[str] = None) -> None:
    """Format and output data to stdout or file.

    Args:
        data: Data to format; pydantic models are dumped first
        fmt: ``json`` for the whole record, ``body`` for the response body only
        output: Optional file path to write to
    """
    if hasattr(data, "model_dump"):
        data = data.model_dump()

    if fmt == "body" and isinstance(data, dict) and "data" in data:
        body = data["data"]
        text = body if isinstance(body, str) else _format_json(body)
    else:
        text = _format_json(data)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Output written to {output}", err=True)
    else:
        click.echo(text)


def _format_json(data: Any) -> str:
    return json.dumps(data, indent=2, default=str)
