"""Category content builders.

Each category label maps to exactly one variant. A variant decides the
header placed above the body and which record fields are mandatory.
Unknown labels are a configuration error, never a silent fallback.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..errors import RecordValidationError, UnknownCategoryError
from ..models import ContentRecord, plain_text
from .sections import build_title, build_video_meta


class Category(Enum):
    THOUGHT = "Thought"
    VIDEO = "Video"
    PROJECT = "Project"


@dataclass(frozen=True)
class CategoryContent:
    """Category-composed body fragment.

    ``has_title`` / ``has_meta`` tell the template assembler that the
    variant already rendered those sections.
    """
    text: str
    has_title: bool = False
    has_meta: bool = False


@dataclass(frozen=True)
class CategoryVariant:
    category: Category
    header: Optional[Callable[[ContentRecord], str]] = None
    requires_link: bool = False
    with_video_meta: bool = False

    def validate(self, record: ContentRecord) -> None:
        """Raise RecordValidationError if a mandatory field is missing."""
        if not record.title_text.strip():
            raise RecordValidationError(record.id, "title")
        if self.requires_link and not record.link:
            raise RecordValidationError(record.id, "link", f"is required for {self.category.value}")
        if self.with_video_meta and record.original and not plain_text(record.uploader).strip():
            raise RecordValidationError(record.id, "uploader", "is required for original videos")

    def build(self, record: ContentRecord, body: str) -> CategoryContent:
        self.validate(record)

        sections = []
        has_title = False
        has_meta = False

        if self.header and not record.hide_title:
            sections.append(self.header(record))
            has_title = True

        if self.with_video_meta and record.show_video_meta:
            sections.append(build_video_meta(record))
            has_meta = True

        if body:
            sections.append(body)

        return CategoryContent(
            text="\n\n".join(sections),
            has_title=has_title,
            has_meta=has_meta,
        )


VARIANTS: dict[Category, CategoryVariant] = {
    Category.THOUGHT: CategoryVariant(Category.THOUGHT),
    Category.VIDEO: CategoryVariant(
        Category.VIDEO, header=build_title, requires_link=True, with_video_meta=True,
    ),
    Category.PROJECT: CategoryVariant(Category.PROJECT, header=build_title, requires_link=True),
}

_missing = set(Category) - set(VARIANTS)
if _missing:
    raise RuntimeError(f"No content variant for: {sorted(c.value for c in _missing)}")


def resolve_category(label: str) -> Category:
    """Map a category label to its Category, raising UnknownCategoryError."""
    try:
        return Category(label)
    except ValueError:
        raise UnknownCategoryError(label) from None


def build_content(record: ContentRecord, body: str) -> CategoryContent:
    """Compose header, optional metadata and body for the record's category."""
    variant = VARIANTS[resolve_category(record.category)]
    return variant.build(record, body)
