"""The immutable content snapshot the server answers requests from."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from handbook.config import Settings
from handbook.models.navigation import NavigationTree
from handbook.models.page import ContentPage
from handbook.services.corpus import load_all
from handbook.services.navigation import build_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Site:
    """Pages, sidebar and slug routing table, built once at startup.

    Never mutated: a new content set means building a new ``Site`` and
    replacing the reference held by the application.
    """

    pages: Tuple[ContentPage, ...]
    navigation: NavigationTree
    routes: Dict[str, ContentPage] = field(default_factory=dict)
    home: Optional[ContentPage] = None

    def page_for(self, slug: str) -> Optional[ContentPage]:
        return self.routes.get(slug)


def build_site(pages: Sequence[ContentPage], index_file: str = "index.md") -> Site:
    routes: Dict[str, ContentPage] = {}
    home = None
    for page in pages:
        if index_file and page.source_name == index_file:
            home = page
        if not page.slug:
            logger.warning(
                "Page '%s' has an empty slug and will not be accessible via a unique URL",
                page.title,
                extra={"source": page.source_name},
            )
            continue
        if page.slug in routes:
            logger.warning(
                "Slug '%s' of '%s' is already used by '%s'; keeping the first page",
                page.slug,
                page.source_name,
                routes[page.slug].source_name,
            )
            continue
        routes[page.slug] = page

    if home is None:
        logger.warning("No home page found", extra={"index_file": index_file})

    return Site(
        pages=tuple(pages),
        navigation=build_index(pages),
        routes=routes,
        home=home,
    )


def load_site(settings: Settings) -> Site:
    """Load the content directory named by *settings* into a :class:`Site`.

    Any content error propagates: the server must not start without the
    complete corpus.
    """
    pages = load_all(settings.content_dir, extension=settings.content_extension)
    site = build_site(pages, index_file=settings.index_file)
    logger.info(
        "Site ready",
        extra={
            "pages": len(site.pages),
            "routes": len(site.routes),
            "categories": len(site.navigation.categories),
        },
    )
    return site
