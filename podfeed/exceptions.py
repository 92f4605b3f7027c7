"""
Feed rendering errors.
"""


class FeedError(Exception):
    """Base class for all rendering errors."""


class MissingEnclosureError(FeedError):
    """An item has no enclosure but the active extension requires one."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"item at {index}: must contain an enclosure")


class ExtensionError(FeedError):
    """An extension failed to apply itself to the markup tree."""

    def __init__(self, extension: str, cause: Exception) -> None:
        self.extension = extension
        self.cause = cause
        super().__init__(f"{extension}: {cause}")


class SerializationError(FeedError):
    """The markup tree could not be encoded as XML."""
