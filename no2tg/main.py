"""no2tg — Main entry point."""

import logging
import os
from datetime import date
from typing import Optional

from .channels import TelegramChannel
from .config import Settings, load_settings, require, resolve_proxy
from .notion import NotionClient
from .publisher import Publisher, RenderedPost

_log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("no2tg")


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Configure console logging, plus a UTF-8 log file when given."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]  # stderr (console)
    if log_file:
        handlers.append(logging.FileHandler(os.path.expanduser(log_file), encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=_log_format,
        handlers=handlers,
        force=True,
    )

    # Silence noisy third-party loggers
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def build_publisher(settings: Settings, deliver: bool = True) -> Publisher:
    """Create a Publisher from settings.

    With ``deliver=False`` no Telegram channel is attached and Telegram
    credentials are not required (preview mode).
    """
    require(settings, "notion_auth_key")
    proxy = resolve_proxy(settings)

    notion = NotionClient(settings.notion_auth_key, timeout=settings.timeout, proxy=proxy)

    channel = None
    if deliver:
        require(settings, "telegram_bot_token", "telegram_chat_id")
        channel = TelegramChannel(
            settings.telegram_bot_token,
            settings.telegram_chat_id,
            timeout=settings.timeout,
            proxy=proxy,
        )

    return Publisher(
        notion,
        channel,
        database_id=settings.notion_database_id,
        auto_change_status=settings.auto_change_status,
        footer=settings.footer,
    )


async def run(
    page_id: Optional[str] = None,
    day: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> Optional[RenderedPost]:
    """Publish one page: by ID if given, otherwise the first one planned for ``day`` (default today)."""
    settings = settings or load_settings()
    publisher = build_publisher(settings)

    if page_id:
        return await publisher.send_by_id(page_id)

    require(settings, "notion_database_id")
    return await publisher.send_by_day(day or date.today())


async def preview(
    page_id: Optional[str] = None,
    day: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> Optional[RenderedPost]:
    """Render the page that ``run`` would publish, without sending it."""
    settings = settings or load_settings()
    publisher = build_publisher(settings, deliver=False)

    if page_id:
        record = await publisher.find_by_id(page_id)
    else:
        require(settings, "notion_database_id")
        record = await publisher.find_by_day(day or date.today())

    if record is None:
        return None
    return await publisher.prepare(record)
