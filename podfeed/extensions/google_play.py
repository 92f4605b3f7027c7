"""
Google Play podcasts extension.
"""

from typing import ClassVar

from pydantic import Field

from ..schemas.feed import Feed
from ..schemas.markup import GOOGLEPLAY_NS, GooglePlayCategory, RSSDocument
from .base import FeedExtension


class GooglePlay(FeedExtension):
    """Google Play podcast categories. Categories are flat names."""

    NAME: ClassVar[str] = "GooglePlay"

    categories: list[str] = Field(default_factory=list)

    def apply(self, feed: Feed, rss: RSSDocument) -> None:
        rss.googleplay_ns = GOOGLEPLAY_NS

        for category in self.categories:
            rss.channel.googleplay_categories.append(GooglePlayCategory(text=category))
