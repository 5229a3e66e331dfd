"""Communication sub-core — Notion content to Telegram MarkdownV2.

This package is the pure transformation pipeline:
- Formatting: escaping, run composition, block translation
- Sections: tags, title, video metadata, covers
- Categories: per-category header and required-field contract
- Template: final text assembly
- Outbound: delivery shape routing
"""

from .formatting import escape, compose, translate, build_link
from .sections import build_tags, build_title, build_video_meta, build_covers
from .categories import Category, CategoryContent, build_content, resolve_category
from .template import DEFAULT_FOOTER, assemble
from .outbound import DeliveryRequest, route

__all__ = [
    # Formatting
    "escape",
    "compose",
    "translate",
    "build_link",
    # Sections
    "build_tags",
    "build_title",
    "build_video_meta",
    "build_covers",
    # Categories
    "Category",
    "CategoryContent",
    "build_content",
    "resolve_category",
    # Template
    "DEFAULT_FOOTER",
    "assemble",
    # Outbound
    "DeliveryRequest",
    "route",
]
