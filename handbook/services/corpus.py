"""Loading every content file in a directory into page records."""

import logging
import os
from pathlib import Path
from typing import List, Union

from handbook.models.page import ContentPage
from handbook.services.document import build_page
from handbook.services.errors import DirectoryUnreadable, FileUnreadable
from handbook.services.frontmatter import parse_document

logger = logging.getLogger(__name__)

CONTENT_EXTENSION = ".md"


def load_page(path: Path) -> ContentPage:
    """Read, parse and render the content file at *path*.

    Raises:
        FileUnreadable: when the file cannot be read.
        MalformedDocument: when the file has no front matter separator.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileUnreadable(exc.strerror or str(exc), path=str(path)) from exc

    metadata, body = parse_document(raw, source=str(path))
    return build_page(metadata, body, source_name=path.name)


def load_all(
    directory: Union[str, Path], extension: str = CONTENT_EXTENSION
) -> List[ContentPage]:
    """Load every ``*<extension>`` file directly inside *directory*.

    Files are processed in name order and that order is kept in the result.
    Other entries, subdirectories included, are skipped.  The first failing
    file aborts the whole load.

    Raises:
        DirectoryUnreadable: when *directory* cannot be listed.
        FileUnreadable, MalformedDocument: from :func:`load_page`.
    """
    directory = Path(directory)
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as exc:
        raise DirectoryUnreadable(exc.strerror or str(exc), path=str(directory)) from exc

    pages: List[ContentPage] = []
    for entry in entries:
        if not entry.name.endswith(extension) or not entry.is_file():
            continue
        pages.append(load_page(Path(entry.path)))

    logger.info("Loaded content pages", extra={"directory": str(directory), "pages": len(pages)})
    return pages
