"""Content data model shared by the parser, the markup core and the publisher.

Everything here is immutable and built fresh for each publishing run.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class Style(Enum):
    """Inline style flags a rich-text run may carry."""
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"


@dataclass(frozen=True)
class RichTextRun:
    """A contiguous span of text sharing one style/link combination."""
    text: str
    href: Optional[str] = None
    style: frozenset[Style] = field(default_factory=frozenset)

    def has(self, flag: Style) -> bool:
        return flag in self.style


@dataclass(frozen=True)
class ContentBlock:
    """One paragraph-equivalent unit of a page body."""
    runs: tuple[RichTextRun, ...] = ()
    kind: str = "paragraph"  # Notion block type, informational only

    @property
    def is_empty(self) -> bool:
        return not self.runs


def plain_text(runs: tuple[RichTextRun, ...]) -> str:
    """Concatenate the unstyled text of a run sequence."""
    return "".join(run.text for run in runs)


@dataclass(frozen=True)
class ContentRecord:
    """A single publishable page from the content store."""
    id: str
    title: tuple[RichTextRun, ...] = ()
    category: str = ""
    tags: tuple[str, ...] = ()  # category excluded
    covers: tuple[str, ...] = ()  # image URLs
    icon: Optional[str] = None
    link: Optional[str] = None  # title, video or project link depending on category
    hide_title: bool = False
    hide_copyright: bool = False
    show_video_meta: bool = False
    original: bool = False
    uploader: tuple[RichTextRun, ...] = ()
    published_on: Optional[date] = None
    pub_order: Optional[float] = None

    @property
    def title_text(self) -> str:
        return plain_text(self.title)
