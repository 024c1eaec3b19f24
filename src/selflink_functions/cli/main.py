"""Main CLI entry point for selflink-functions."""

from typing import Optional
import click

from .. import __version__
from ..config import LOG_LEVELS
from ..utils.logger import setup_logger
from .commands.functions import call_function, describe_function, list_functions


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(sorted(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Log level (overrides SELFLINK_LOG_LEVEL)"
)
def cli(log_level: Optional[str]):
    """Extract names, projects, regions and zones from resource self links."""
    setup_logger(level=log_level)


# Register commands
cli.add_command(list_functions)
cli.add_command(describe_function)
cli.add_command(call_function)


if __name__ == "__main__":
    cli()
