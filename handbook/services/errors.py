"""Errors raised while loading the content directory at startup.

Every one of these is fatal: the server never starts with a partial corpus.
Invalid field values (for example a non-numeric ``Order``) are not errors;
they fall back to defaults in :mod:`handbook.services.document`.
"""

from typing import Optional


class ContentError(Exception):
    """Base class for content loading failures."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class MalformedDocument(ContentError, ValueError):
    """The document has no ``---`` separator between front matter and body."""


class DirectoryUnreadable(ContentError, OSError):
    """The content directory could not be listed."""


class FileUnreadable(ContentError, OSError):
    """A content file could not be read."""
