"""
Feed domain schemas.

Caller-owned description of a feed and its items. The renderer only reads
these models, so they are frozen.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Link(_Frozen):
    """Link with optional display text."""

    url: str = ""
    text: str = ""


class Author(_Frozen):
    """Feed or item author."""

    name: str = ""
    email: str = ""


class Image(_Frozen):
    """Image reference. Zero width/height means unspecified."""

    url: str = ""
    title: str = ""
    link: str = ""
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class Category(_Frozen):
    """
    Category with an optional nested sub-category.

    The sub-category relation is a linear chain, e.g. "Arts" > "Books".
    """

    name: str
    sub: Category | None = None


class Enclosure(_Frozen):
    """Media attachment of an item."""

    url: str = ""
    length: str = ""  # bytes, caller formatted
    type: str = ""
    duration: timedelta | None = None


class Item(_Frozen):
    """Single feed entry (episode, article)."""

    id: str = ""
    link: Link | None = None
    created: datetime | None = None
    updated: datetime | None = None
    title: str = ""
    description: str = ""
    content: str | None = None  # full body, rendered as content:encoded
    image: Image | None = None
    author: Author | None = None
    enclosure: Enclosure | None = None
    explicit: bool = False


class Feed(_Frozen):
    """Feed metadata and its ordered items."""

    id: str = ""
    link: Link | None = None
    created: datetime | None = None
    updated: datetime | None = None  # defaults to now (UTC) at render time
    title: str = ""
    subtitle: str = ""
    description: str = ""
    language: str = ""
    copyright: str = ""
    generator: str = ""
    explicit: bool = False
    author: Author | None = None
    owner: Author | None = None
    image: Image | None = None
    items: list[Item] = Field(default_factory=list)
