"""Front matter splitting and ``Key: value`` metadata extraction."""

import re
from typing import Dict, Tuple

from handbook.services.errors import MalformedDocument

SEPARATOR = "---"

# One ``Key: value`` pair per line; keys are ASCII word characters.
_META_LINE_RE = re.compile(r"^(\w+):[ \t]*(.*)$", re.MULTILINE | re.ASCII)


def split_document(raw: bytes, source: str = "") -> Tuple[str, str]:
    """Split *raw* into ``(metadata_block, body_block)``.

    The split happens at the first occurrence of ``---`` anywhere in the
    text.  Carriage returns are removed from both blocks.

    Raises:
        MalformedDocument: when the text contains no separator.
    """
    text = raw.decode("utf-8-sig", errors="replace")
    parts = text.split(SEPARATOR, 1)
    if len(parts) < 2:
        raise MalformedDocument(
            f"missing '{SEPARATOR}' front matter separator", path=source or None
        )

    metadata, body = parts
    return metadata.replace("\r", ""), body.replace("\r", "")


def parse_metadata(block: str) -> Dict[str, str]:
    """Return the ``Key: value`` pairs found in *block*.

    Lines that do not look like ``Key: value`` are ignored.  When a key
    appears more than once the last value wins.
    """
    metadata: Dict[str, str] = {}
    for match in _META_LINE_RE.finditer(block):
        metadata[match.group(1)] = match.group(2).strip()
    return metadata


def parse_document(raw: bytes, source: str = "") -> Tuple[Dict[str, str], str]:
    """Split *raw* and parse its front matter in one step."""
    metadata_block, body = split_document(raw, source)
    return parse_metadata(metadata_block), body
