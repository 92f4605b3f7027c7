"""
Podfeed Package.

Renders feeds as RSS 2.0 documents with optional Apple Podcasts, Google Play
and Podcast Index extensions.
"""

__version__ = "0.1.0"

from .logging_config import init_logging, get_logger

from .exceptions import ExtensionError, FeedError, MissingEnclosureError, SerializationError
from .extensions import (
    ApplePodcast,
    FeedExtension,
    Generator,
    GooglePlay,
    MinimizeOutput,
    PodcastIndex,
)
from .renderer import build_rss, render
from .schemas import Author, Category, Enclosure, Feed, Image, Item, Link
from .serializer import serialize

__all__ = [
    "init_logging",
    "get_logger",
    "render",
    "build_rss",
    "serialize",
    # Schemas
    "Feed",
    "Item",
    "Author",
    "Image",
    "Link",
    "Category",
    "Enclosure",
    # Extensions
    "FeedExtension",
    "ApplePodcast",
    "GooglePlay",
    "PodcastIndex",
    "MinimizeOutput",
    "Generator",
    # Errors
    "FeedError",
    "ExtensionError",
    "MissingEnclosureError",
    "SerializationError",
]
