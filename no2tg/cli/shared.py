"""Shared utilities for no2tg CLI commands."""

import logging
import sys
from datetime import date, datetime

import click
from rich.console import Console

from no2tg.communication.errors import classify_error
from no2tg.config import load_settings
from no2tg.main import setup_logging

console = Console()
logger = logging.getLogger("no2tg.cli")


def parse_day(ctx, param, value):
    """Click callback: YYYY-MM-DD → date."""
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter("expected YYYY-MM-DD") from None


def _init(debug: bool):
    """Load settings and configure logging for a command."""
    settings = load_settings()
    setup_logging(debug=debug, log_file=settings.log_file)
    return settings


def _fail(e: Exception):
    """Log the traceback, print a classified one-liner, exit 1."""
    logger.debug("Command failed", exc_info=e)
    console.print(f"[red]{classify_error(e)}[/red]")
    sys.exit(1)


def _describe_day(day: date | None) -> str:
    return (day or date.today()).isoformat()
