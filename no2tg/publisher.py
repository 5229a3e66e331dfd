"""Pick one page, render it, deliver it and optionally mark it Published.

A run is strictly sequential: fetch record → fetch blocks → render
(pure) → deliver → status update. Nothing is shared between runs.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .communication import (
    DEFAULT_FOOTER,
    DeliveryRequest,
    assemble,
    build_content,
    build_covers,
    route,
    translate,
)
from .errors import ConfigurationError
from .models import ContentBlock, ContentRecord
from .notion import NotionClient, PUBLISHED_STATUS, parse_blocks, parse_page

logger = logging.getLogger("no2tg.publisher")

READY_STATUS = "Completed"


@dataclass(frozen=True)
class RenderedPost:
    record: ContentRecord
    text: str
    covers: list
    request: DeliveryRequest


def render(
    record: ContentRecord,
    blocks: list[ContentBlock],
    footer: Optional[str] = DEFAULT_FOOTER,
) -> RenderedPost:
    """Turn a record and its body blocks into final text and a delivery request.

    Raises UnknownCategoryError / RecordValidationError before anything
    is produced.
    """
    body = translate(blocks)
    content = build_content(record, body)
    text = assemble(record, content, footer=footer)
    covers = build_covers(record)
    return RenderedPost(record=record, text=text, covers=covers, request=route(text, covers))


def day_filter(day: date) -> dict:
    """Database filter: planned for ``day`` and ready to go."""
    return {
        "and": [
            {"property": "PlanningPublish", "date": {"equals": day.isoformat()}},
            {"property": "Status", "select": {"equals": READY_STATUS}},
        ]
    }


def _pub_order_key(record: ContentRecord) -> float:
    return record.pub_order if record.pub_order is not None else float("inf")


class Publisher:
    """Wires the Notion store and a delivery channel around render()."""

    def __init__(
        self,
        notion: NotionClient,
        channel=None,
        database_id: Optional[str] = None,
        auto_change_status: bool = False,
        footer: Optional[str] = DEFAULT_FOOTER,
    ):
        self.notion = notion
        self.channel = channel
        self.database_id = database_id
        self.auto_change_status = auto_change_status
        self.footer = footer

    async def find_by_id(self, page_id: str) -> Optional[ContentRecord]:
        page = await self.notion.retrieve_page(page_id)
        if not page or not page.get("id"):
            logger.warning(f"No page {page_id}. Please recheck the page ID.")
            return None
        return parse_page(page)

    async def find_by_day(self, day: date) -> Optional[ContentRecord]:
        """The lowest-PubOrder ready page planned for ``day``."""
        pages = await self.notion.query_database(self.database_id, filter=day_filter(day))
        if not pages:
            logger.info(f"Nothing to publish on {day.isoformat()}")
            return None

        records = sorted((parse_page(page) for page in pages), key=_pub_order_key)
        logger.info(f"{len(records)} page(s) ready for {day.isoformat()}, publishing {records[0].id}")
        return records[0]

    async def prepare(self, record: ContentRecord) -> RenderedPost:
        """Fetch the record's body and render it."""
        raw_blocks = await self.notion.list_block_children(record.id)
        post = render(record, parse_blocks(raw_blocks), footer=self.footer)
        logger.info(f"Final text for {record.id}:\n{post.text}")
        return post

    async def publish(self, record: ContentRecord) -> RenderedPost:
        post = await self.prepare(record)

        if self.channel is None:
            raise ConfigurationError("Publisher has no delivery channel")
        result = await self.channel.send(post.request)
        logger.info(f"Sent {record.id} via {post.request.method}")
        logger.debug(f"Telegram result: {result}")

        if self.auto_change_status:
            await self.notion.update_page_status(record.id, PUBLISHED_STATUS)
            logger.info(f"Page {record.id} status changed to {PUBLISHED_STATUS}")

        return post

    async def send_by_id(self, page_id: str) -> Optional[RenderedPost]:
        record = await self.find_by_id(page_id)
        if record is None:
            return None
        return await self.publish(record)

    async def send_by_day(self, day: date) -> Optional[RenderedPost]:
        record = await self.find_by_day(day)
        if record is None:
            return None
        return await self.publish(record)
