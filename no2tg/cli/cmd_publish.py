"""Publish and preview commands."""

import asyncio
import click

from . import cli
from .shared import console, parse_day, _describe_day, _fail, _init


@cli.command()
@click.option("--id", "-i", "page_id", help="Publish this Notion page ID")
@click.option("--day", "-d", callback=parse_day, help="Publish the page planned for this day (YYYY-MM-DD)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def publish(page_id, day, debug):
    """Publish one page to Telegram (default: today's planned page)."""
    settings = _init(debug)

    from no2tg.main import run
    target = f"page {page_id}" if page_id else f"day {_describe_day(day)}"
    console.print(f"[bold blue]Publishing {target}...[/bold blue]")

    try:
        post = asyncio.run(run(page_id=page_id, day=day, settings=settings))
    except Exception as e:
        _fail(e)

    if post is None:
        console.print("[yellow]Nothing published.[/yellow]")
        return
    console.print(f"[green]✓ Sent {post.record.id} via {post.request.method}[/green]")


@cli.command()
@click.option("--id", "-i", "page_id", help="Preview this Notion page ID")
@click.option("--day", "-d", callback=parse_day, help="Preview the page planned for this day (YYYY-MM-DD)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def preview(page_id, day, debug):
    """Render a page as it would be sent, without sending it (default: today's planned page)."""
    settings = _init(debug)

    from no2tg.main import preview as run_preview
    try:
        post = asyncio.run(run_preview(page_id=page_id, day=day, settings=settings))
    except Exception as e:
        _fail(e)

    if post is None:
        console.print("[yellow]Nothing to preview.[/yellow]")
        return

    console.print(f"[bold]Method:[/bold] {post.request.method}  [bold]Covers:[/bold] {len(post.covers)}")
    console.print()
    console.print(post.text, markup=False, highlight=False)
