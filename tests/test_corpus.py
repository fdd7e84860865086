"""Tests for handbook.services.corpus."""

import pytest

from handbook.services.corpus import load_all, load_page
from handbook.services.errors import DirectoryUnreadable, FileUnreadable, MalformedDocument


def _write(directory, name: str, text: str):
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def _doc(title: str, slug: str = "", parent: str = "", order: str = "") -> str:
    lines = [f"Title: {title}", f"Slug: {slug}", f"Parent: {parent}"]
    if order:
        lines.append(f"Order: {order}")
    return "\n".join(lines) + "\n---\n## Section\n\nBody of " + title + ".\n"


class TestLoadPage:
    def test_loads_file(self, tmp_path):
        path = _write(tmp_path, "intro.md", _doc("Intro", slug="intro", order="1"))
        page = load_page(path)
        assert page.title == "Intro"
        assert page.slug == "intro"
        assert page.rank == 1
        assert page.source_name == "intro.md"
        assert page.headings == ("Section",)

    def test_missing_file_raises_file_unreadable(self, tmp_path):
        with pytest.raises(FileUnreadable) as info:
            load_page(tmp_path / "missing.md")
        assert info.value.path == str(tmp_path / "missing.md")

    def test_handles_crlf(self, tmp_path):
        path = tmp_path / "win.md"
        path.write_bytes(b"Title: Windows\r\nSlug: win\r\n---\r\n## Part\r\n")
        page = load_page(path)
        assert page.title == "Windows"
        assert page.headings == ("Part",)


class TestLoadAll:
    def test_loads_in_name_order(self, tmp_path):
        _write(tmp_path, "b.md", _doc("B", slug="b"))
        _write(tmp_path, "a.md", _doc("A", slug="a"))
        _write(tmp_path, "c.md", _doc("C", slug="c"))
        assert [p.title for p in load_all(tmp_path)] == ["A", "B", "C"]

    def test_skips_other_files_and_directories(self, tmp_path):
        _write(tmp_path, "page.md", _doc("Page", slug="page"))
        _write(tmp_path, "notes.txt", "not content")
        (tmp_path / "nested.md").mkdir()
        (tmp_path / "sub").mkdir()
        _write(tmp_path / "sub", "deep.md", _doc("Deep", slug="deep"))
        assert [p.title for p in load_all(tmp_path)] == ["Page"]

    def test_custom_extension(self, tmp_path):
        _write(tmp_path, "page.md", _doc("Markdown"))
        _write(tmp_path, "page.txt", _doc("Text"))
        assert [p.title for p in load_all(tmp_path, extension=".txt")] == ["Text"]

    def test_keeps_duplicate_slugs(self, tmp_path):
        _write(tmp_path, "a.md", _doc("First", slug="same"))
        _write(tmp_path, "b.md", _doc("Second", slug="same"))
        assert [p.title for p in load_all(tmp_path)] == ["First", "Second"]

    def test_keeps_empty_slug_pages(self, tmp_path):
        _write(tmp_path, "a.md", _doc("No slug"))
        pages = load_all(tmp_path)
        assert len(pages) == 1
        assert pages[0].slug == ""

    def test_malformed_file_aborts_load(self, tmp_path):
        _write(tmp_path, "a.md", _doc("Good", slug="good"))
        _write(tmp_path, "b.md", "Title: X\nNo delimiter here")
        _write(tmp_path, "c.md", _doc("Also good", slug="also-good"))
        with pytest.raises(MalformedDocument) as info:
            load_all(tmp_path)
        assert info.value.path == str(tmp_path / "b.md")

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(DirectoryUnreadable):
            load_all(tmp_path / "nope")

    def test_empty_directory(self, tmp_path):
        assert load_all(tmp_path) == []
