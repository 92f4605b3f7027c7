"""
Output options: minimized output and generator override.
"""

from typing import ClassVar

from ..schemas.feed import Feed
from ..schemas.markup import RSSDocument
from .base import FeedExtension


class MinimizeOutput(FeedExtension):
    """Emit the feed without indentation when enabled."""

    NAME: ClassVar[str] = "MinimizeOutput"

    enabled: bool = True

    def apply(self, feed: Feed, rss: RSSDocument) -> None:
        rss.minimize = self.enabled


class Generator(FeedExtension):
    """Replace the channel <generator> with a fixed name, ignoring Feed.generator."""

    NAME: ClassVar[str] = "Generator"

    name: str

    def apply(self, feed: Feed, rss: RSSDocument) -> None:
        rss.channel.generator = self.name or None
