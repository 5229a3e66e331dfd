"""Final text assembly from ordered optional fragments."""

from ..models import ContentRecord
from .categories import CategoryContent
from .sections import build_tags, build_title, build_video_meta

DEFAULT_FOOTER = "频道：@AboutZY"


def collect_sections(
    record: ContentRecord,
    content: CategoryContent,
    footer: str | None = DEFAULT_FOOTER,
) -> list[str]:
    """Return the fragments that make up the final text, in order.

    Tags are always present, the body whenever it is non-empty. The
    title and video metadata are skipped when the record hides them or
    the category variant already rendered them. The footer is dropped when the record hides the
    copyright line or no footer is configured.
    """
    sections = [build_tags(record)]

    if not record.hide_title and not content.has_title:
        sections.append(build_title(record))

    if record.show_video_meta and not content.has_meta:
        sections.append(build_video_meta(record))

    if content.text:
        sections.append(content.text)

    if footer and not record.hide_copyright:
        sections.append(footer)

    return sections


def assemble(
    record: ContentRecord,
    content: CategoryContent,
    footer: str | None = DEFAULT_FOOTER,
) -> str:
    """Build the final MarkdownV2 text for a record."""
    return "\n\n".join(collect_sections(record, content, footer))
