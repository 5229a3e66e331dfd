"""Notion content store adapter."""

from .client import NotionClient, PUBLISHED_STATUS
from .parser import parse_block, parse_blocks, parse_page, parse_rich_text

__all__ = [
    "NotionClient",
    "PUBLISHED_STATUS",
    "parse_block",
    "parse_blocks",
    "parse_page",
    "parse_rich_text",
]
