"""
Pydantic schemas for feed input and RSS markup.
"""

from .feed import Author, Category, Enclosure, Feed, Image, Item, Link
from .markup import (
    CONTENT_NS,
    GOOGLEPLAY_NS,
    ITUNES_NS,
    PODCAST_NS,
    GooglePlayCategory,
    ItunesCategory,
    ItunesImage,
    ItunesOwner,
    PodcastFunding,
    RSSChannel,
    RSSDocument,
    RSSEnclosure,
    RSSImage,
    RSSItem,
)

__all__ = [
    # Feed
    "Author",
    "Category",
    "Enclosure",
    "Feed",
    "Image",
    "Item",
    "Link",
    # Markup
    "CONTENT_NS",
    "GOOGLEPLAY_NS",
    "ITUNES_NS",
    "PODCAST_NS",
    "GooglePlayCategory",
    "ItunesCategory",
    "ItunesImage",
    "ItunesOwner",
    "PodcastFunding",
    "RSSChannel",
    "RSSDocument",
    "RSSEnclosure",
    "RSSImage",
    "RSSItem",
]
