"""Notion JSON → content model.

Property names follow the publishing database schema:
  Name, Category, Tags, Cover, TitleLink, IsHideTitle, IsHideCopyright,
  WithVideoMeta, vOriginal, vUp, vPubDate, PubOrder

Missing or empty properties degrade to empty / False / None. Whether a
record is complete enough to publish is decided by its category variant.
"""

from datetime import date, datetime
from typing import Optional

from ..models import ContentBlock, ContentRecord, RichTextRun, Style


def parse_rich_text(items) -> tuple[RichTextRun, ...]:
    """Convert a Notion rich-text array into RichTextRun objects."""
    runs = []
    for item in items or []:
        annotations = item.get("annotations") or {}
        style = frozenset(flag for flag in Style if annotations.get(flag.value))
        text = item.get("plain_text")
        if text is None:
            text = (item.get("text") or {}).get("content", "")
        runs.append(RichTextRun(text=text, href=item.get("href") or None, style=style))
    return tuple(runs)


def parse_block(block: dict) -> ContentBlock:
    """Convert one Notion block. Blocks without rich text come back empty."""
    kind = block.get("type", "")
    payload = block.get(kind) or {}
    items = payload.get("rich_text")
    if items is None:
        # Pre-2022 API responses used "text"
        items = payload.get("text")
    return ContentBlock(runs=parse_rich_text(items), kind=kind)


def parse_blocks(blocks) -> list[ContentBlock]:
    return [parse_block(block) for block in blocks]


def _prop(page: dict, name: str) -> dict:
    return (page.get("properties") or {}).get(name) or {}


def _checkbox(page: dict, name: str) -> bool:
    return bool(_prop(page, name).get("checkbox"))


def _select_name(page: dict, name: str) -> str:
    select = _prop(page, name).get("select") or {}
    return select.get("name", "")


def _parse_date(value: Optional[str]) -> Optional[date]:
    """Take the calendar date of a Notion date string, without tz conversion."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return date.fromisoformat(value[:10])


def _cover_url(file: dict) -> Optional[str]:
    kind = file.get("type")
    if kind in ("file", "external"):
        return (file.get(kind) or {}).get("url")
    return (file.get("file") or file.get("external") or {}).get("url")


def parse_page(page: dict) -> ContentRecord:
    """Convert a Notion page object into a ContentRecord."""
    covers = tuple(
        url for url in (_cover_url(f) for f in _prop(page, "Cover").get("files") or []) if url
    )
    tags = tuple(tag.get("name", "") for tag in _prop(page, "Tags").get("multi_select") or [])
    icon = page.get("icon") or {}
    pub_date = _prop(page, "vPubDate").get("date") or {}

    return ContentRecord(
        id=page.get("id", ""),
        title=parse_rich_text(_prop(page, "Name").get("title")),
        category=_select_name(page, "Category"),
        tags=tags,
        covers=covers,
        icon=icon.get("emoji"),
        link=_prop(page, "TitleLink").get("url") or None,
        hide_title=_checkbox(page, "IsHideTitle"),
        hide_copyright=_checkbox(page, "IsHideCopyright"),
        show_video_meta=_checkbox(page, "WithVideoMeta"),
        original=_checkbox(page, "vOriginal"),
        uploader=parse_rich_text(_prop(page, "vUp").get("rich_text")),
        published_on=_parse_date(pub_date.get("start")),
        pub_order=_prop(page, "PubOrder").get("number"),
    )
