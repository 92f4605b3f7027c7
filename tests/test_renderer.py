"""Tests for the RSS renderer."""

from datetime import UTC, datetime

import pytest
from lxml import etree
from pydantic import ValidationError

from podfeed import Author, Feed, Image, Item, Link, build_rss, render
from podfeed.schemas.markup import CONTENT_NS

UPDATED = datetime(2024, 3, 5, 14, 30, 0, tzinfo=UTC)
PUBLISHED = "Tue, 05 Mar 2024 14:30:00 +0000"


def _parse(output: str) -> etree._Element:
    return etree.fromstring(output.encode("utf-8"))


class TestBuildRSS:
    """Test the markup tree built from a feed."""

    def test_required_channel_fields(self, minimal_feed: Feed):
        rss = build_rss(minimal_feed)

        assert rss.version == "2.0"
        assert rss.content_ns == CONTENT_NS
        assert rss.channel.title == "T"
        assert rss.channel.link == "http://x"
        assert rss.channel.description == "D"

    def test_dates_from_updated(self, minimal_feed: Feed):
        rss = build_rss(minimal_feed)

        assert rss.channel.pub_date == PUBLISHED
        assert rss.channel.last_build_date == PUBLISHED

    def test_optional_fields_absent(self, minimal_feed: Feed):
        rss = build_rss(minimal_feed)

        assert rss.channel.language is None
        assert rss.channel.copyright is None
        assert rss.channel.generator is None
        assert rss.channel.managing_editor is None
        assert rss.channel.image is None
        assert rss.itunes_ns is None
        assert rss.googleplay_ns is None
        assert rss.podcast_ns is None

    def test_managing_editor(self, podcast_feed: Feed):
        rss = build_rss(podcast_feed)

        assert rss.channel.managing_editor == "jappleseed@example.com (Johnny Appleseed)"

    def test_managing_editor_without_email_omitted(self):
        feed = Feed(title="T", author=Author(name="Jo"), updated=UPDATED)

        assert build_rss(feed).channel.managing_editor is None

    def test_updated_defaults_to_now(self):
        feed = Feed(title="T")
        before = datetime.now(UTC).replace(microsecond=0)

        rss = build_rss(feed)

        assert rss.channel.pub_date is not None
        published = datetime.strptime(rss.channel.pub_date, "%a, %d %b %Y %H:%M:%S %z")
        assert published >= before
        # The caller's feed is left untouched
        assert feed.updated is None

    def test_missing_link_renders_empty(self):
        rss = build_rss(Feed(title="T", description="D", updated=UPDATED))

        assert rss.channel.link == ""

    def test_channel_image(self, podcast_feed: Feed):
        image = build_rss(podcast_feed).channel.image

        assert image is not None
        assert image.url == "https://example.com/cover.jpg"
        assert image.width == 144
        assert image.height == 144

    def test_item_fields(self, podcast_feed: Feed):
        item = build_rss(podcast_feed).channel.items[0]

        assert item.title == "Episode 1"
        assert item.link == "https://example.com/1"
        assert item.description == "First episode"
        assert item.guid == "ep-1"
        assert item.pub_date == PUBLISHED
        assert item.author == "jo@example.com (Jo)"
        assert item.content == "<p>Show notes &amp; links</p>"
        assert item.enclosure is not None
        assert item.enclosure.url == "https://example.com/ep1.mp3"
        assert item.enclosure.length == "123456"
        assert item.enclosure.type == "audio/mpeg"

    def test_item_without_updated_uses_feed_date(self):
        feed = Feed(title="T", updated=UPDATED, items=[Item(title="I")])

        assert build_rss(feed).channel.items[0].pub_date == PUBLISHED

    def test_item_optional_fields_absent(self):
        feed = Feed(title="T", updated=UPDATED, items=[Item(title="I", author=Author(name="Jo"))])
        item = build_rss(feed).channel.items[0]

        assert item.author is None
        assert item.enclosure is None
        assert item.guid is None
        assert item.content is None
        assert item.itunes_duration is None

    def test_items_keep_order(self, podcast_feed: Feed):
        items = build_rss(podcast_feed).channel.items

        assert [i.guid for i in items] == ["ep-1", "ep-2"]


class TestRender:
    """Test end-to-end rendering."""

    def test_xml_header(self, minimal_feed: Feed):
        output = render(minimal_feed)

        assert output.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<rss')

    def test_minimal_feed_end_to_end(self, minimal_feed: Feed):
        root = _parse(render(minimal_feed))

        assert root.tag == "rss"
        assert root.get("version") == "2.0"
        assert root.nsmap == {"content": CONTENT_NS}

        items = root.findall("channel/item")
        assert len(items) == 1
        assert [child.tag for child in items[0]] == [
            "title",
            "link",
            "description",
            "guid",
            "pubDate",
        ]
        assert items[0].findtext("guid") == "item-1"
        assert items[0].findtext("pubDate") == PUBLISHED

    def test_empty_optional_fields_not_emitted(self, minimal_feed: Feed):
        channel = _parse(render(minimal_feed)).find("channel")

        for tag in ("language", "copyright", "generator", "managingEditor", "image"):
            assert channel.find(tag) is None

    def test_empty_required_fields_emitted(self):
        channel = _parse(render(Feed(updated=UPDATED))).find("channel")

        assert channel.find("title") is not None
        assert channel.find("link") is not None
        assert channel.find("description") is not None
        assert channel.findtext("title") == ""

    def test_channel_elements(self, podcast_feed: Feed):
        channel = _parse(render(podcast_feed)).find("channel")

        assert channel.findtext("language") == "en-us"
        assert channel.findtext("copyright") == "2024 Example Inc."
        assert channel.findtext("generator") == "Example CMS"
        assert channel.findtext("managingEditor") == "jappleseed@example.com (Johnny Appleseed)"
        assert channel.findtext("image/url") == "https://example.com/cover.jpg"
        assert channel.findtext("image/width") == "144"

    def test_channel_image_without_size(self):
        feed = Feed(title="T", updated=UPDATED, image=Image(url="https://example.com/a.png"))
        image = _parse(render(feed)).find("channel/image")

        assert image.findtext("url") == "https://example.com/a.png"
        assert image.find("width") is None
        assert image.find("height") is None

    def test_enclosure_attributes(self, podcast_feed: Feed):
        enclosure = _parse(render(podcast_feed)).find("channel/item/enclosure")

        assert dict(enclosure.attrib) == {
            "url": "https://example.com/ep1.mp3",
            "length": "123456",
            "type": "audio/mpeg",
        }
        assert enclosure.text is None

    def test_content_encoded_is_cdata(self, podcast_feed: Feed):
        output = render(podcast_feed)

        expected = "<content:encoded><![CDATA[<p>Show notes &amp; links</p>]]></content:encoded>"
        assert expected in output

    def test_text_is_escaped(self):
        feed = Feed(title="Q&A <live>", updated=UPDATED)
        output = render(feed)

        assert "<title>Q&amp;A &lt;live&gt;</title>" in output
        assert _parse(output).findtext("channel/title") == "Q&A <live>"

    def test_render_is_idempotent(self, podcast_feed: Feed):
        assert render(podcast_feed) == render(podcast_feed)

    def test_render_does_not_mutate_feed(self, podcast_feed: Feed):
        snapshot = podcast_feed.model_dump()

        render(podcast_feed)

        assert podcast_feed.model_dump() == snapshot

    def test_indented_output(self, minimal_feed: Feed):
        output = render(minimal_feed)

        assert "\n  <channel>\n    <title>T</title>" in output

    def test_feed_is_frozen(self, minimal_feed: Feed):
        with pytest.raises(ValidationError):
            minimal_feed.title = "changed"  # type: ignore[misc]

    def test_link_without_scheme_is_copied_verbatim(self):
        feed = Feed(title="T", link=Link(url="example.com/feed"), updated=UPDATED)

        assert _parse(render(feed)).findtext("channel/link") == "example.com/feed"
