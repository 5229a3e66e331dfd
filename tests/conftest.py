"""Pytest configuration and shared fixtures."""

import pytest

from no2tg.models import ContentBlock, ContentRecord, RichTextRun


def run(text, href=None, *styles):
    """Shorthand for a RichTextRun."""
    return RichTextRun(text=text, href=href, style=frozenset(styles))


def block(*texts):
    """A paragraph of plain runs."""
    return ContentBlock(runs=tuple(RichTextRun(text=t) for t in texts))


@pytest.fixture
def thought_record():
    return ContentRecord(
        id="page-thought",
        title=(RichTextRun(text="A thought"),),
        category="Thought",
    )


@pytest.fixture
def video_record():
    return ContentRecord(
        id="page-video",
        title=(RichTextRun(text="Cats v1.0"),),
        category="Video",
        tags=("fun",),
        icon="🎬",
        link="https://b23.tv/abc",
        show_video_meta=True,
        original=True,
        uploader=(RichTextRun(text="ZY", href="https://space.bilibili.com/1"),),
    )


@pytest.fixture
def notion_page():
    """A Notion page object as returned by GET /pages/{id}."""
    return {
        "object": "page",
        "id": "page-1",
        "icon": {"type": "emoji", "emoji": "💡"},
        "properties": {
            "Name": {"type": "title", "title": [
                {"plain_text": "Hello ", "href": None, "annotations": {}},
                {"plain_text": "World", "href": None, "annotations": {"bold": True}},
            ]},
            "Category": {"type": "select", "select": {"name": "Thought"}},
            "Tags": {"type": "multi_select", "multi_select": [{"name": "notes"}, {"name": "life"}]},
            "Cover": {"type": "files", "files": [
                {"name": "a.png", "type": "file", "file": {"url": "https://s3/a.png"}},
                {"name": "b.png", "type": "external", "external": {"url": "https://cdn/b.png"}},
            ]},
            "TitleLink": {"type": "url", "url": "https://example.com"},
            "IsHideTitle": {"type": "checkbox", "checkbox": False},
            "IsHideCopyright": {"type": "checkbox", "checkbox": True},
            "WithVideoMeta": {"type": "checkbox", "checkbox": False},
            "vOriginal": {"type": "checkbox", "checkbox": True},
            "vUp": {"type": "rich_text", "rich_text": [
                {"plain_text": "UP", "href": "https://up", "annotations": {"italic": True}},
            ]},
            "vPubDate": {"type": "date", "date": {"start": "2021-05-01T20:00:00.000+08:00"}},
            "PubOrder": {"type": "number", "number": 2},
        },
    }
