"""no2tg CLI — command line interface."""

import click
from no2tg import __version__


@click.group()
@click.version_option(version=__version__, prog_name="no2tg")
def cli():
    """no2tg — publish Notion pages to a Telegram channel"""


# Import all command modules (registers commands onto cli group)
from . import cmd_publish  # noqa: E402, F401
