"""
Podcast Index namespace extension.
"""

from typing import ClassVar

from ..schemas.feed import Feed, Link
from ..schemas.markup import PODCAST_NS, PodcastFunding, RSSDocument
from .base import FeedExtension


class PodcastIndex(FeedExtension):
    """Podcast Index metadata. Currently only the funding link."""

    NAME: ClassVar[str] = "PodcastIndex"

    funding: Link | None = None

    def apply(self, feed: Feed, rss: RSSDocument) -> None:
        rss.podcast_ns = PODCAST_NS

        if self.funding is not None:
            rss.channel.podcast_funding = PodcastFunding(
                url=self.funding.url,
                text=self.funding.text,
            )
