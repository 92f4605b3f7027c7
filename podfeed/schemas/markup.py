"""
RSS markup tree.

Intermediate representation of the output document. Field order follows
element order in the serialized XML. ``None`` (or an empty list) means the
element is omitted.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"
GOOGLEPLAY_NS = "http://www.google.com/schemas/play-podcasts/1.0"
PODCAST_NS = "https://podcastindex.org/namespace/1.0"


class RSSImage(BaseModel):
    """<image> element of a channel."""

    url: str = ""
    title: str = ""
    link: str = ""
    width: int = 0
    height: int = 0


class RSSEnclosure(BaseModel):
    """<enclosure> element; all fields are attributes."""

    url: str = ""
    length: str = ""
    type: str = ""


class ItunesImage(BaseModel):
    """<itunes:image href="..."/>."""

    href: str


class ItunesCategory(BaseModel):
    """<itunes:category text="..."> with at most one nested category."""

    text: str
    sub: ItunesCategory | None = None


class ItunesOwner(BaseModel):
    """<itunes:owner> with email and name children."""

    email: str = ""
    name: str = ""


class GooglePlayCategory(BaseModel):
    """<googleplay:category text="..."/>."""

    text: str


class PodcastFunding(BaseModel):
    """<podcast:funding url="...">text</podcast:funding>."""

    url: str
    text: str = ""


class RSSItem(BaseModel):
    """<item> element."""

    title: str = ""  # required
    link: str = ""  # required
    description: str = ""  # required
    content: str | None = None  # CDATA
    author: str | None = None
    enclosure: RSSEnclosure | None = None
    guid: str | None = None
    pub_date: str | None = None

    itunes_image: ItunesImage | None = None
    itunes_duration: str | None = None
    itunes_explicit: str | None = None


class RSSChannel(BaseModel):
    """<channel> element."""

    title: str = ""  # required
    link: str = ""  # required
    description: str = ""  # required
    language: str | None = None
    copyright: str | None = None
    managing_editor: str | None = None
    pub_date: str | None = None
    last_build_date: str | None = None
    generator: str | None = None
    image: RSSImage | None = None

    itunes_image: ItunesImage | None = None
    itunes_categories: list[ItunesCategory] = Field(default_factory=list)
    itunes_explicit: str | None = None
    itunes_author: str | None = None
    itunes_owner: ItunesOwner | None = None
    itunes_type: str | None = None
    itunes_complete: str | None = None

    googleplay_categories: list[GooglePlayCategory] = Field(default_factory=list)

    podcast_funding: PodcastFunding | None = None

    items: list[RSSItem] = Field(default_factory=list)


class RSSDocument(BaseModel):
    """
    Root <rss> element.

    Namespace fields are declared on the root only when set. ``minimize`` is
    not serialized; it controls whitespace in the output.
    """

    version: str = "2.0"
    content_ns: str = CONTENT_NS
    itunes_ns: str | None = None
    googleplay_ns: str | None = None
    podcast_ns: str | None = None
    channel: RSSChannel = Field(default_factory=RSSChannel)

    minimize: bool = False
