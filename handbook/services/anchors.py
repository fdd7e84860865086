"""Anchor ids and in-page jump links for section headings.

The renderer assigns heading ids with :func:`sanitize` too, so a link built
here always points at the id the rendered page carries.
"""

import re
from typing import Iterable

from markupsafe import Markup, escape

_NON_ANCHOR_RE = re.compile(r"[^a-z0-9\-]")

# Optional closing run of hashes plus trailing whitespace on an ATX heading line.
_ATX_CLOSING_RE = re.compile(r"(?:[ \t]+#+)?[ \t]*$")


def heading_text(raw: str) -> str:
    """Return the heading text of an ATX heading line with its opening marker removed.

    Trailing whitespace and a closing ``#`` sequence are dropped; everything
    else is kept as written.
    """
    return _ATX_CLOSING_RE.sub("", raw, count=1)


def sanitize(heading: str) -> str:
    """Return the anchor id for *heading*.

    Lowercases, turns each space into a hyphen and drops every character
    that is not a lowercase ASCII letter, a digit or a hyphen.  Distinct
    headings may produce the same id; no suffix is added.
    """
    anchor = heading.lower().replace(" ", "-")
    return _NON_ANCHOR_RE.sub("", anchor)


def anchors_for(headings: Iterable[str]) -> Markup:
    """Render one ``<li>`` jump link per heading, in order."""
    links = [
        Markup('<li><a href="#{}">{}</a></li>').format(sanitize(heading), escape(heading))
        for heading in headings
    ]
    return Markup("").join(links)
