"""
RSS renderer.

Builds the markup tree for a feed, applies extensions and serializes the
result.
"""

from datetime import datetime, timezone

from podfeed import get_logger

from .exceptions import ExtensionError
from .extensions.base import FeedExtension
from .formatting import format_author, format_rfc1123
from .schemas.feed import Feed, Item
from .schemas.markup import RSSChannel, RSSDocument, RSSEnclosure, RSSImage, RSSItem
from .serializer import serialize

logger = get_logger(__name__)


def render(feed: Feed, *extensions: FeedExtension) -> str:
    """
    Render a feed as an RSS 2.0 document.

    Extensions are applied in the order given. Rendering is all or nothing:
    no output is returned when any step fails.

    Args:
        feed: Feed to render.
        *extensions: Extensions to apply to the markup tree.

    Returns:
        XML text including the XML declaration.

    Raises:
        ExtensionError: If an extension cannot be applied.
        SerializationError: If the markup tree cannot be encoded.
    """
    rss = build_rss(feed)

    for extension in extensions:
        try:
            extension.apply(feed, rss)
        except Exception as e:
            logger.warning(
                "Feed extension failed",
                extra={"extension": extension.NAME, "error": str(e)},
            )
            raise ExtensionError(extension.NAME, e) from e

    output = serialize(rss)
    logger.debug(
        "Rendered RSS feed",
        extra={
            "items": len(rss.channel.items),
            "extensions": [extension.NAME for extension in extensions],
            "size": len(output),
        },
    )
    return output


def build_rss(feed: Feed) -> RSSDocument:
    """
    Build the <rss> markup tree for a feed, including channel and items.

    The feed itself is not modified.
    """
    updated = feed.updated or datetime.now(timezone.utc)
    published = format_rfc1123(updated)

    channel = RSSChannel(
        title=feed.title,
        link=feed.link.url if feed.link else "",
        description=feed.description,
        language=feed.language or None,
        copyright=feed.copyright or None,
        managing_editor=format_author(feed.author) or None,
        pub_date=published,
        last_build_date=published,
        generator=feed.generator or None,
    )

    if feed.image is not None:
        channel.image = RSSImage(
            url=feed.image.url,
            title=feed.image.title,
            link=feed.image.link,
            width=feed.image.width,
            height=feed.image.height,
        )

    for item in feed.items:
        channel.items.append(build_item(item, default_date=published))

    return RSSDocument(channel=channel)


def build_item(item: Item, default_date: str | None = None) -> RSSItem:
    """
    Build an <item> element for a feed item.

    Args:
        item: Source item.
        default_date: pubDate used when the item has no timestamp.

    Returns:
        Item markup.
    """
    node = RSSItem(
        title=item.title,
        link=item.link.url if item.link else "",
        description=item.description,
        content=item.content or None,
        guid=item.id or None,
        pub_date=format_rfc1123(item.updated) if item.updated else default_date,
    )

    if item.author is not None:
        node.author = format_author(item.author) or None

    if item.enclosure is not None:
        node.enclosure = RSSEnclosure(
            url=item.enclosure.url,
            length=item.enclosure.length,
            type=item.enclosure.type,
        )

    return node
