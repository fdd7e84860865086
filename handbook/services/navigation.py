"""Sidebar navigation built from the ``Parent`` and ``Order`` of each page."""

from typing import Dict, Iterable, List

from handbook.models.navigation import Category, NavigationTree
from handbook.models.page import ContentPage


def build_index(pages: Iterable[ContentPage]) -> NavigationTree:
    """Group *pages* by category and order the categories by rank.

    Pages without a category are left out.  A category takes the rank of
    the first page seen with it; later pages never change it, even when
    their own rank differs.  Categories of equal rank stay in the order
    they were first seen.
    """
    ranks: Dict[str, int] = {}
    members: Dict[str, List[ContentPage]] = {}
    for page in pages:
        if not page.category:
            continue
        if page.category not in members:
            ranks[page.category] = page.rank
            members[page.category] = []
        members[page.category].append(page)

    categories = [
        Category(name=name, rank=ranks[name], pages=tuple(group))
        for name, group in members.items()
    ]
    # sorted() is stable: equal ranks keep first-seen order
    categories = sorted(categories, key=lambda category: category.rank)
    return NavigationTree(categories=tuple(categories))
