"""Markdown to HTML conversion for page bodies.

Uses Python-Markdown with the ``extra`` and ``smarty`` extensions plus a
small local extension that:

* gives every heading without an explicit ``{#id}`` the anchor id produced
  by :func:`handbook.services.anchors.sanitize` (no de-duplication);
* opens absolute links in a new browsing context (``target="_blank"``).

ATX headings (``## Text``) take their id from the heading text as written in
the source, the same text the page's jump links are built from, so
typographic substitutions and inline markup never change an id.  The id rides
through inline parsing on an empty raw-HTML placeholder, which renders as
nothing.  Other headings (setext, headings inside raw HTML) fall back to
their rendered text.
"""

import re
import xml.etree.ElementTree as etree
from typing import Dict, List
from urllib.parse import urlparse

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE

from handbook.services.anchors import heading_text, sanitize

_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}

_ATX_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.*)$")
# Explicit ``{#id}``-style attr_list block at the end of a heading line.
_ATTR_LIST_RE = re.compile(r"[ ]+\{:?[^}\n]*\}[ ]*$")
_TAG_RE = re.compile(r"<[^>]+>")
_ENTITY_RE = re.compile(r"&[#a-zA-Z0-9]+;")

# After fenced_code (25) and html_block (20) have stashed their blocks.
_PREPROCESSOR_PRIORITY = 15
# Runs after inline parsing (priority 20), same slot as the toc extension.
_TREEPROCESSOR_PRIORITY = 5


def _is_absolute(href: str) -> bool:
    parsed = urlparse(href)
    return bool(parsed.scheme or parsed.netloc)


class _HeadingIdPreprocessor(Preprocessor):
    """Tag each ATX heading line with a placeholder mapped to its source anchor."""

    def __init__(self, md: markdown.Markdown, anchors: Dict[str, str]) -> None:
        super().__init__(md)
        self.anchors = anchors

    def run(self, lines: List[str]) -> List[str]:
        result = []
        for line in lines:
            match = _ATX_HEADING_RE.match(line)
            if match and not _ATTR_LIST_RE.search(line):
                text = heading_text(match.group(2))
                anchor = sanitize(text)
                if anchor:
                    placeholder = self.md.htmlStash.store("")
                    self.anchors[placeholder] = anchor
                    line = f"{match.group(1)} {text}{placeholder}"
            result.append(line)
        return result


class _HandbookTreeprocessor(Treeprocessor):
    def __init__(self, md: markdown.Markdown, anchors: Dict[str, str]) -> None:
        super().__init__(md)
        self.anchors = anchors

    def run(self, root: etree.Element) -> None:
        for el in root.iter():
            if el.tag in _HEADING_TAGS and "id" not in el.attrib:
                el.set("id", self._anchor(el))
            elif el.tag == "a" and _is_absolute(el.get("href", "")):
                el.set("target", "_blank")

    def _anchor(self, el: etree.Element) -> str:
        text = "".join(el.itertext())
        for match in HTML_PLACEHOLDER_RE.finditer(text):
            if match.group(0) in self.anchors:
                return self.anchors[match.group(0)]
        return sanitize(self._rendered_text(text))

    def _rendered_text(self, text: str) -> str:
        text = HTML_PLACEHOLDER_RE.sub(self._stashed_text, text)
        return self.md.treeprocessors["unescape"].unescape(text)

    def _stashed_text(self, match: "re.Match[str]") -> str:
        raw = self.md.htmlStash.rawHtmlBlocks[int(match.group(1))]
        if not isinstance(raw, str):
            return "".join(raw.itertext())
        return _ENTITY_RE.sub("", _TAG_RE.sub("", raw))


class HandbookExtension(Extension):
    """Heading ids and external-link targets for handbook pages."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        anchors: Dict[str, str] = {}
        md.preprocessors.register(
            _HeadingIdPreprocessor(md, anchors), "handbook_heading_ids", _PREPROCESSOR_PRIORITY
        )
        md.treeprocessors.register(
            _HandbookTreeprocessor(md, anchors), "handbook", _TREEPROCESSOR_PRIORITY
        )


def render_markdown(text: str) -> str:
    """Convert Markdown *text* to an HTML fragment."""
    md = markdown.Markdown(extensions=["extra", "smarty", HandbookExtension()])
    return md.convert(text)
