"""
RSS serializer.

Encodes the markup tree as XML text using lxml.
"""

from lxml import etree

from .exceptions import SerializationError
from .schemas.markup import (
    CONTENT_NS,
    GOOGLEPLAY_NS,
    ITUNES_NS,
    PODCAST_NS,
    ItunesCategory,
    ItunesImage,
    RSSChannel,
    RSSDocument,
    RSSItem,
)

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = "  "


def serialize(rss: RSSDocument) -> str:
    """
    Serialize an RSS markup tree.

    Args:
        rss: Markup tree.

    Returns:
        XML declaration followed by the <rss> element, indented with two
        spaces unless the tree is marked as minimized.

    Raises:
        SerializationError: If the tree holds values XML cannot represent.
    """
    try:
        root = _build_root(rss)
        if not rss.minimize:
            etree.indent(root, space=INDENT)
        body = etree.tostring(root, encoding="unicode")
    except (etree.LxmlError, ValueError, TypeError) as e:
        raise SerializationError(f"xml marshal: {e}") from e

    return XML_HEADER + body


def _build_root(rss: RSSDocument) -> etree._Element:
    nsmap = {"content": rss.content_ns}
    if rss.itunes_ns:
        nsmap["itunes"] = rss.itunes_ns
    if rss.googleplay_ns:
        nsmap["googleplay"] = rss.googleplay_ns
    if rss.podcast_ns:
        nsmap["podcast"] = rss.podcast_ns

    root = etree.Element("rss", nsmap=nsmap)
    root.set("version", rss.version)
    _build_channel(root, rss.channel)
    return root


def _text(
    parent: etree._Element, tag: str, value: str | int | None, required: bool = False
) -> None:
    """Append a text element, skipping empty values unless required."""
    if not value and not required:
        return
    child = etree.SubElement(parent, tag)
    child.text = str(value) if value else ""


def _itunes(name: str) -> str:
    return etree.QName(ITUNES_NS, name).text


def _itunes_image(parent: etree._Element, image: ItunesImage | None) -> None:
    if image is not None:
        etree.SubElement(parent, _itunes("image"), href=image.href)


def _itunes_category(parent: etree._Element, category: ItunesCategory) -> None:
    node = etree.SubElement(parent, _itunes("category"), text=category.text)
    if category.sub is not None:
        _itunes_category(node, category.sub)


def _build_channel(root: etree._Element, channel: RSSChannel) -> None:
    el = etree.SubElement(root, "channel")

    _text(el, "title", channel.title, required=True)
    _text(el, "link", channel.link, required=True)
    _text(el, "description", channel.description, required=True)
    _text(el, "language", channel.language)
    _text(el, "copyright", channel.copyright)
    _text(el, "managingEditor", channel.managing_editor)
    _text(el, "pubDate", channel.pub_date)
    _text(el, "lastBuildDate", channel.last_build_date)
    _text(el, "generator", channel.generator)

    if channel.image is not None:
        image = etree.SubElement(el, "image")
        _text(image, "url", channel.image.url, required=True)
        _text(image, "title", channel.image.title, required=True)
        _text(image, "link", channel.image.link, required=True)
        _text(image, "width", channel.image.width)
        _text(image, "height", channel.image.height)

    # iTunes
    _itunes_image(el, channel.itunes_image)
    for category in channel.itunes_categories:
        _itunes_category(el, category)
    _text(el, _itunes("explicit"), channel.itunes_explicit)
    _text(el, _itunes("author"), channel.itunes_author)
    if channel.itunes_owner is not None:
        owner = etree.SubElement(el, _itunes("owner"))
        _text(owner, _itunes("email"), channel.itunes_owner.email)
        _text(owner, _itunes("name"), channel.itunes_owner.name)
    _text(el, _itunes("type"), channel.itunes_type)
    _text(el, _itunes("complete"), channel.itunes_complete)

    # Google Play
    for gp_category in channel.googleplay_categories:
        etree.SubElement(el, etree.QName(GOOGLEPLAY_NS, "category").text, text=gp_category.text)

    # Podcast Index
    if channel.podcast_funding is not None:
        funding = etree.SubElement(
            el, etree.QName(PODCAST_NS, "funding").text, url=channel.podcast_funding.url
        )
        funding.text = channel.podcast_funding.text

    for item in channel.items:
        _build_item(el, item)


def _build_item(channel: etree._Element, item: RSSItem) -> None:
    el = etree.SubElement(channel, "item")

    _text(el, "title", item.title, required=True)
    _text(el, "link", item.link, required=True)
    _text(el, "description", item.description, required=True)
    if item.content:
        content = etree.SubElement(el, etree.QName(CONTENT_NS, "encoded").text)
        content.text = etree.CDATA(item.content)
    _text(el, "author", item.author)
    if item.enclosure is not None:
        etree.SubElement(
            el,
            "enclosure",
            url=item.enclosure.url,
            length=item.enclosure.length,
            type=item.enclosure.type,
        )
    _text(el, "guid", item.guid)
    _text(el, "pubDate", item.pub_date)

    _itunes_image(el, item.itunes_image)
    _text(el, _itunes("duration"), item.itunes_duration)
    _text(el, _itunes("explicit"), item.itunes_explicit)
