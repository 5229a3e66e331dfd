"""Section builders: self-contained MarkdownV2 fragments for one record."""

from ..models import ContentRecord, plain_text
from .formatting import build_link, compose_runs, escape

ORIGINAL_YES = "👩‍💻 原创：✅"
ORIGINAL_NO = "👩‍💻 原创：❌"


def build_tags(record: ContentRecord) -> str:
    """Hashtag line. The category is always the first tag.

    Tag names are not escaped beyond the ``\\#`` prefix.
    """
    tags = [record.category, *record.tags]
    return " ".join(f"\\#{tag}" for tag in tags)


def build_title(record: ContentRecord) -> str:
    """Bold title, linked when a link exists, prefixed with the page icon.

    Title text carries no per-run styling, so it is rendered as one bold
    span rather than through the annotation composer.
    """
    title = f"*{escape(record.title_text)}*"
    if record.link:
        title = build_link(title, record.link)
    if record.icon:
        title = f"{record.icon} {title}"
    return title


def build_video_meta(record: ContentRecord) -> str:
    """Originality, uploader and publish date, one per line."""
    meta = [ORIGINAL_YES if record.original else ORIGINAL_NO]

    if plain_text(record.uploader):
        meta.append(f"🆙 UP：{compose_runs(record.uploader)}")

    if record.published_on:
        meta.append(f"⏰ 发布时间：{escape(record.published_on.strftime('%Y-%m-%d'))}")

    return "\n".join(meta)


def build_covers(record: ContentRecord) -> list[str]:
    """Cover image URLs in their original order."""
    return list(record.covers)
