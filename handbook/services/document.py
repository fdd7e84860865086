"""Typed page records built from parsed front matter and a Markdown body."""

import logging
import re
from typing import List, Mapping, Optional

from handbook.models.page import DEFAULT_RANK, ContentPage
from handbook.services.anchors import heading_text
from handbook.services.renderer import render_markdown

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^##\s+(.*)", re.MULTILINE)
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_rank(value: Optional[str]) -> int:
    """Return *value* as an integer rank, or ``DEFAULT_RANK`` when unusable."""
    if value is None:
        return DEFAULT_RANK
    if not _INTEGER_RE.match(value):
        logger.debug("Invalid Order value %r, using %d", value, DEFAULT_RANK)
        return DEFAULT_RANK
    return int(value)


def extract_headings(body: str) -> List[str]:
    """Return the text of every ``##`` heading in *body*, in document order.

    The heading markers are removed; the text itself is kept as written.
    """
    return [heading_text(match.group(1)) for match in _HEADING_RE.finditer(body)]


def build_page(metadata: Mapping[str, str], body: str, source_name: str = "") -> ContentPage:
    """Assemble a :class:`ContentPage` from front matter and body text.

    Missing text fields become empty strings and a missing or non-numeric
    ``Order`` becomes ``DEFAULT_RANK``; nothing here raises.
    """
    return ContentPage(
        title=metadata.get("Title", ""),
        slug=metadata.get("Slug", ""),
        category=metadata.get("Parent", ""),
        summary=metadata.get("Description", ""),
        rendered_body=render_markdown(body),
        headings=tuple(extract_headings(body)),
        rank=parse_rank(metadata.get("Order")),
        meta_description=metadata.get("MetaDescription", ""),
        meta_property_title=metadata.get("MetaPropertyTitle", ""),
        meta_property_description=metadata.get("MetaPropertyDescription", ""),
        meta_og_url=metadata.get("MetaOgURL", ""),
        source_name=source_name,
    )
