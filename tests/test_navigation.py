"""Tests for handbook.services.navigation.build_index."""

from handbook.models.page import DEFAULT_RANK, ContentPage
from handbook.services.navigation import build_index


def _page(title: str, category: str = "", rank: int = DEFAULT_RANK) -> ContentPage:
    return ContentPage(title=title, slug=title.lower(), category=category, rank=rank)


class TestBuildIndex:
    def test_groups_pages_by_category(self):
        tree = build_index(
            [_page("A", "Guides", 1), _page("B", "Reference", 2), _page("C", "Guides", 1)]
        )
        assert [c.name for c in tree.categories] == ["Guides", "Reference"]
        assert [p.title for p in tree.categories[0].pages] == ["A", "C"]

    def test_pages_without_category_are_excluded(self):
        tree = build_index([_page("Home"), _page("A", "Guides", 1)])
        assert [c.name for c in tree.categories] == ["Guides"]
        assert all(p.title != "Home" for c in tree.categories for p in c.pages)

    def test_first_page_fixes_category_rank(self):
        tree = build_index([_page("P1", "Guides", 2), _page("P2", "Guides", 5)])
        assert tree.categories[0].rank == 2

    def test_sorts_by_rank_with_stable_ties(self):
        tree = build_index([_page("a", "A", 5), _page("b", "B", 1), _page("c", "C", 5)])
        assert [c.name for c in tree.categories] == ["B", "A", "C"]

    def test_missing_rank_sorts_last(self):
        tree = build_index([_page("x", "Unranked"), _page("y", "Ranked", 10)])
        assert [c.name for c in tree.categories] == ["Ranked", "Unranked"]
        assert tree.categories[1].rank == DEFAULT_RANK

    def test_pages_keep_discovery_order_within_category(self):
        tree = build_index([_page("Z", "G", 3), _page("A", "G", 1), _page("M", "G", 2)])
        assert [p.title for p in tree.categories[0].pages] == ["Z", "A", "M"]

    def test_category_names_are_unique(self):
        pages = [_page(str(i), "G" if i % 2 else "H", i) for i in range(10)]
        names = [c.name for c in build_index(pages).categories]
        assert len(names) == len(set(names))

    def test_empty_corpus(self):
        assert build_index([]).categories == ()

    def test_does_not_carry_state_between_calls(self):
        build_index([_page("A", "Old", 1)])
        tree = build_index([_page("B", "New", 1)])
        assert [c.name for c in tree.categories] == ["New"]
