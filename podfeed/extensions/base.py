"""
Base feed extension interface.

This module defines the abstract base class for all feed extensions.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from ..schemas.feed import Feed
from ..schemas.markup import RSSDocument


class FeedExtension(BaseModel, ABC):
    """
    Abstract base class for feed extensions.

    An extension adds a namespace or an output option to the markup tree.
    Each extension touches its own part of the tree, so extensions can be
    applied in any order.
    """

    model_config = ConfigDict(frozen=True)

    NAME: ClassVar[str]

    @abstractmethod
    def apply(self, feed: Feed, rss: RSSDocument) -> None:
        """
        Apply the extension to the markup tree in place.

        Args:
            feed: Source feed, read only.
            rss: Markup tree built from ``feed``.

        Raises:
            FeedError: If the feed does not satisfy the extension's requirements.
        """
        pass
