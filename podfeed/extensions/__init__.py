"""
Feed extensions package.

Optional namespaces and output options applied to the RSS markup tree.
"""

from .apple_podcast import ApplePodcast
from .base import FeedExtension
from .google_play import GooglePlay
from .output import Generator, MinimizeOutput
from .podcast_index import PodcastIndex

__all__ = [
    "FeedExtension",
    "ApplePodcast",
    "GooglePlay",
    "PodcastIndex",
    "MinimizeOutput",
    "Generator",
]
