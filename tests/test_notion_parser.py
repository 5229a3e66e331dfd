"""Tests for Notion JSON → content model conversion."""

from datetime import date

from no2tg.models import RichTextRun, Style
from no2tg.notion.parser import parse_block, parse_blocks, parse_page, parse_rich_text


class TestParseRichText:
    def test_annotations_to_style(self):
        runs = parse_rich_text([{
            "plain_text": "x",
            "href": "https://x",
            "annotations": {"bold": True, "italic": False, "code": True, "color": "red"},
        }])
        assert runs[0].text == "x"
        assert runs[0].href == "https://x"
        assert runs[0].style == frozenset({Style.BOLD, Style.CODE})

    def test_falls_back_to_text_content(self):
        runs = parse_rich_text([{"text": {"content": "raw"}}])
        assert runs[0].text == "raw"
        assert runs[0].href is None

    def test_none(self):
        assert parse_rich_text(None) == ()


class TestParseBlock:
    def test_paragraph(self):
        b = parse_block({"type": "paragraph", "paragraph": {"rich_text": [{"plain_text": "hi"}]}})
        assert b.kind == "paragraph"
        assert b.runs[0].text == "hi"

    def test_legacy_text_key(self):
        b = parse_block({"type": "paragraph", "paragraph": {"text": [{"plain_text": "old"}]}})
        assert b.runs[0].text == "old"

    def test_heading_and_quote(self):
        blocks = parse_blocks([
            {"type": "heading_2", "heading_2": {"rich_text": [{"plain_text": "H"}]}},
            {"type": "quote", "quote": {"rich_text": [{"plain_text": "Q"}]}},
        ])
        assert [b.runs[0].text for b in blocks] == ["H", "Q"]

    def test_non_text_block_is_empty(self):
        assert parse_block({"type": "divider", "divider": {}}).is_empty
        assert parse_block({"type": "image", "image": {"file": {"url": "u"}}}).is_empty

    def test_empty_paragraph(self):
        assert parse_block({"type": "paragraph", "paragraph": {"rich_text": []}}).is_empty


class TestParsePage:
    def test_full_page(self, notion_page):
        record = parse_page(notion_page)
        assert record.id == "page-1"
        assert record.title_text == "Hello World"
        assert record.category == "Thought"
        assert record.tags == ("notes", "life")
        assert record.covers == ("https://s3/a.png", "https://cdn/b.png")
        assert record.icon == "💡"
        assert record.link == "https://example.com"
        assert record.hide_title is False
        assert record.hide_copyright is True
        assert record.show_video_meta is False
        assert record.original is True
        assert record.uploader[0].href == "https://up"
        assert record.uploader[0].style == frozenset({Style.ITALIC})
        assert record.published_on == date(2021, 5, 1)
        assert record.pub_order == 2

    def test_run_fields_are_tuples_of_runs(self, notion_page):
        record = parse_page(notion_page)
        assert isinstance(record.title, tuple)
        assert isinstance(record.uploader, tuple)
        assert all(isinstance(run, RichTextRun) for run in record.title + record.uploader)
        assert all(isinstance(flag, Style) for run in record.uploader for flag in run.style)

    def test_date_only(self, notion_page):
        notion_page["properties"]["vPubDate"]["date"] = {"start": "2022-12-31"}
        assert parse_page(notion_page).published_on == date(2022, 12, 31)

    def test_missing_properties_degrade(self):
        record = parse_page({"id": "bare", "properties": {}})
        assert record.title == ()
        assert record.category == ""
        assert record.tags == ()
        assert record.covers == ()
        assert record.icon is None
        assert record.link is None
        assert record.published_on is None
        assert record.pub_order is None
        assert not record.hide_title

    def test_null_selects(self, notion_page):
        notion_page["properties"]["Category"]["select"] = None
        notion_page["properties"]["vPubDate"]["date"] = None
        notion_page["properties"]["TitleLink"]["url"] = None
        notion_page["icon"] = None
        record = parse_page(notion_page)
        assert record.category == ""
        assert record.published_on is None
        assert record.link is None
        assert record.icon is None
