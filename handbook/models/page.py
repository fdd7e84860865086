from typing import Tuple

from pydantic import BaseModel, ConfigDict

# Rank given to pages without a usable ``Order`` value; sorts them last.
DEFAULT_RANK = 9999


class ContentPage(BaseModel):
    """One content document, parsed and rendered at startup."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    slug: str = ""  # empty: loaded, but not reachable by its own URL
    category: str = ""  # ``Parent``; empty: not listed in the sidebar
    summary: str = ""  # ``Description``
    rendered_body: str = ""  # trusted HTML, output without escaping
    headings: Tuple[str, ...] = ()
    rank: int = DEFAULT_RANK
    meta_description: str = ""
    meta_property_title: str = ""
    meta_property_description: str = ""
    meta_og_url: str = ""
    source_name: str = ""
