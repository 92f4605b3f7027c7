"""
Value formatting helpers shared by the renderer and extensions.
"""

import math
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

from .schemas.feed import Author


def format_author(author: Author | None) -> str:
    """
    Format an author for an RSS author/managingEditor element.

    With both email and name: "jappleseed@example.com (Johnny Appleseed)".
    With only an email, the email. Without an email, an empty string.
    """
    if author is None or not author.email:
        return ""
    if not author.name:
        return author.email
    return f"{author.email} ({author.name})"


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as h:mm:ss, rounded to the nearest second.

    Negative durations give an empty string.
    """
    if duration < timedelta(0):
        return ""
    total = math.floor(duration.total_seconds() + 0.5)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_rfc1123(value: datetime) -> str:
    """
    Format a timestamp as RFC 1123 with a numeric zone.

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)
