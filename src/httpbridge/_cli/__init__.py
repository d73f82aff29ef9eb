import click
from dotenv import load_dotenv

from .._config import Config
from .._services import HttpService
from .._utils._logs import setup_logging
from .cli_http import download, request, upload


@click.group()
@click.version_option(package_name="httpbridge")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, debug):
    """Make HTTP requests, download and upload files."""
    load_dotenv()
    setup_logging(debug)
    ctx.obj = HttpService(config=Config.from_env())


cli.add_command(request)
cli.add_command(download)
cli.add_command(upload)
