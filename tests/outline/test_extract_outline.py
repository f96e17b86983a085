"""Tests for extract_outline — flat PyMuPDF TOC → OutlineNode tree."""

from unittest.mock import MagicMock, patch

import pymupdf

from shared.pdf_parser.extract_outline import build_outline, extract_outline, read_outline
from shared.pdf_parser.types import OutlineNode


class TestBuildOutline:
    """build_outline() nests entries by level and converts 1-based pages
    to 0-based, marking unresolved destinations as None."""

    def test_empty_toc_is_none(self):
        assert build_outline([]) is None

    def test_siblings_and_children(self):
        tree = build_outline([
            [1, "One", 3],
            [2, "1.1", 4],
            [2, "1.2", 6],
            [1, "Two", 10],
        ])

        assert tree.title is None and tree.page is None
        assert [n.title for n in tree.children] == ["One", "Two"]
        assert tree.children[0].page == 2
        assert tree.children[0].children == (
            OutlineNode("1.1", 3), OutlineNode("1.2", 5),
        )
        assert tree.children[1].children == ()

    def test_return_to_shallower_level(self):
        tree = build_outline([
            [1, "A", 1],
            [2, "A.1", 2],
            [3, "A.1.a", 3],
            [1, "B", 4],
            [2, "B.1", 5],
        ])

        a, b = tree.children
        assert a.children[0].children == (OutlineNode("A.1.a", 2),)
        assert b.children == (OutlineNode("B.1", 4),)

    def test_unresolved_and_external_become_none(self):
        tree = build_outline([
            [1, "Dangling", 0],
            [1, "Web", -1, {"kind": 2, "uri": "https://example.com"}],
            [1, "Ok", 2, {"kind": 1}],
        ])
        assert [n.page for n in tree.children] == [None, None, 1]


class TestReadOutline:
    def test_reads_detailed_toc(self):
        doc = MagicMock()
        doc.get_toc.return_value = [[1, "Only", 5, {}]]

        tree = read_outline(doc)

        doc.get_toc.assert_called_once_with(simple=False)
        assert tree.children == (OutlineNode("Only", 4),)

    def test_no_bookmarks_returns_none(self):
        doc = MagicMock()
        doc.get_toc.return_value = []
        assert read_outline(doc) is None


class TestExtractOutline:
    def test_closes_document(self):
        mock_doc = MagicMock()
        mock_doc.get_toc.return_value = []

        with patch("shared.pdf_parser.extract_outline.pymupdf") as mock_pymupdf:
            mock_pymupdf.open.return_value = mock_doc
            assert extract_outline("/fake/book.pdf") is None

        mock_doc.close.assert_called_once()

    def test_real_pdf_bookmarks(self, make_pdf):
        path = make_pdf(10, toc=[
            [1, "Intro", 1],
            [2, "Background", 2],
            [1, "Body", 5],
        ])

        tree = extract_outline(path)

        intro, body = tree.children
        assert (intro.title, intro.page) == ("Intro", 0)
        assert (body.title, body.page) == ("Body", 4)
        assert intro.children == (OutlineNode("Background", 1),)

    def test_real_pdf_without_bookmarks(self, make_pdf):
        assert extract_outline(make_pdf(3)) is None


def test_last_page_bookmark_is_zero_based(make_pdf):
    doc = pymupdf.open(make_pdf(4, toc=[[1, "Last", 4]]))
    try:
        assert read_outline(doc).children[0].page == 3
    finally:
        doc.close()
