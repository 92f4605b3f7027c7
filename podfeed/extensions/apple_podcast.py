"""
Apple Podcasts (iTunes) extension.
"""

from typing import ClassVar, Literal

from pydantic import Field

from ..exceptions import MissingEnclosureError
from ..formatting import format_duration
from ..schemas.feed import Category, Feed
from ..schemas.markup import ITUNES_NS, ItunesCategory, ItunesImage, ItunesOwner, RSSDocument
from .base import FeedExtension


def build_category(category: Category | None) -> ItunesCategory | None:
    """Build an <itunes:category>, nesting its sub-categories."""
    if category is None:
        return None
    return ItunesCategory(text=category.name, sub=build_category(category.sub))


class ApplePodcast(FeedExtension):
    """
    Apple Podcasts directory metadata.

    Every item must carry an enclosure.
    """

    NAME: ClassVar[str] = "ApplePodcast"

    # Possibly nested categories for the Apple Podcasts directory
    categories: list[Category] = Field(default_factory=list)
    # Show type: episodic or serial
    type: Literal["", "episodic", "serial"] = ""
    # True if the podcast will never have more episodes
    complete: bool = False

    def apply(self, feed: Feed, rss: RSSDocument) -> None:
        channel = rss.channel
        rss.itunes_ns = ITUNES_NS

        if feed.image is not None:
            channel.itunes_image = ItunesImage(href=feed.image.url)
        for category in self.categories:
            channel.itunes_categories.append(build_category(category))
        channel.itunes_explicit = "true" if feed.explicit else "false"

        if feed.author is not None:
            channel.itunes_author = feed.author.name or None

        if feed.owner is not None:
            channel.itunes_owner = ItunesOwner(email=feed.owner.email, name=feed.owner.name)

        for i, (node, src) in enumerate(zip(channel.items, feed.items)):
            if src.enclosure is None:
                raise MissingEnclosureError(i)

            duration = src.enclosure.duration
            if duration is not None and duration.total_seconds() > 0:
                node.itunes_duration = format_duration(duration)
            if src.image is not None:
                node.itunes_image = ItunesImage(href=src.image.url)
            if src.explicit:
                node.itunes_explicit = "true"

        channel.itunes_type = self.type or None

        if self.complete:
            channel.itunes_complete = "Yes"
