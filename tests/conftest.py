"""Shared pytest fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from podfeed import Author, Enclosure, Feed, Image, Item, Link

UPDATED = datetime(2024, 3, 5, 14, 30, 0, tzinfo=UTC)


@pytest.fixture
def minimal_feed() -> Feed:
    """Feed with only the required fields and one bare item."""
    return Feed(
        title="T",
        link=Link(url="http://x"),
        description="D",
        updated=UPDATED,
        items=[
            Item(
                id="item-1",
                title="Item",
                link=Link(url="http://x/1"),
                description="Item D",
                updated=UPDATED,
            )
        ],
    )


@pytest.fixture
def podcast_feed() -> Feed:
    """Fully populated podcast feed with two episodes."""
    return Feed(
        id="feed-1",
        title="Example Podcast",
        link=Link(url="https://example.com"),
        description="All about examples",
        language="en-us",
        copyright="2024 Example Inc.",
        generator="Example CMS",
        explicit=False,
        updated=UPDATED,
        author=Author(name="Johnny Appleseed", email="jappleseed@example.com"),
        owner=Author(name="Example Inc.", email="owner@example.com"),
        image=Image(
            url="https://example.com/cover.jpg",
            title="Example Podcast",
            link="https://example.com",
            width=144,
            height=144,
        ),
        items=[
            Item(
                id="ep-1",
                title="Episode 1",
                link=Link(url="https://example.com/1"),
                description="First episode",
                content="<p>Show notes &amp; links</p>",
                updated=UPDATED,
                author=Author(name="Jo", email="jo@example.com"),
                image=Image(url="https://example.com/ep1.jpg"),
                explicit=True,
                enclosure=Enclosure(
                    url="https://example.com/ep1.mp3",
                    length="123456",
                    type="audio/mpeg",
                    duration=timedelta(seconds=3725),
                ),
            ),
            Item(
                id="ep-2",
                title="Episode 2",
                link=Link(url="https://example.com/2"),
                description="Second episode",
                updated=UPDATED + timedelta(days=7),
                enclosure=Enclosure(
                    url="https://example.com/ep2.mp3",
                    length="654321",
                    type="audio/mpeg",
                ),
            ),
        ],
    )
