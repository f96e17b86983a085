"""Tests for ranges_from_chapters — bookmark chapters to page ranges."""

from shared.pdf_parser.build_ranges import ranges_from_chapters
from shared.pdf_parser.types import Chapter, PageRange


class TestRangesFromChapters:
    """Each chapter runs until the next one starts; the last one runs to
    the end of the document."""

    def test_three_chapters_on_100_pages(self):
        chapters = [Chapter(0, "Intro"), Chapter(20, "Core"), Chapter(55, "Appendix")]

        ranges = ranges_from_chapters(chapters, 100)

        assert ranges == [
            PageRange(0, 20, 1, "01 - Intro.pdf"),
            PageRange(20, 55, 2, "02 - Core.pdf"),
            PageRange(55, 100, 3, "03 - Appendix.pdf"),
        ]

    def test_contiguous_and_exhaustive(self):
        chapters = [Chapter(p, f"C{p}") for p in (0, 3, 4, 17, 40)]
        ranges = ranges_from_chapters(chapters, 41)

        for a, b in zip(ranges, ranges[1:]):
            assert a.end == b.start
        assert ranges[0].start == 0
        assert ranges[-1].end == 41
        assert sum(r.page_count for r in ranges) == 41

    def test_first_chapter_after_page_zero_keeps_its_start(self):
        ranges = ranges_from_chapters([Chapter(5, "Only")], 10)
        assert [(r.start, r.end) for r in ranges] == [(5, 10)]

    def test_duplicate_page_dropped_and_indices_compact(self):
        chapters = [Chapter(0, "A"), Chapter(10, "B"), Chapter(10, "B again"), Chapter(20, "C")]

        ranges = ranges_from_chapters(chapters, 30)

        assert [(r.start, r.end) for r in ranges] == [(0, 10), (10, 20), (20, 30)]
        assert [r.index for r in ranges] == [1, 2, 3]
        assert [r.filename for r in ranges] == ["01 - A.pdf", "02 - B again.pdf", "03 - C.pdf"]

    def test_chapter_on_last_page_boundary_dropped(self):
        ranges = ranges_from_chapters([Chapter(0, "A"), Chapter(10, "Past end")], 10)
        assert [r.filename for r in ranges] == ["01 - A.pdf"]

    def test_title_sanitized_and_truncated(self):
        title = 'What? A "Long" <Title>: ' + "x" * 80
        ranges = ranges_from_chapters([Chapter(0, title)], 5)

        name = ranges[0].filename
        assert name.startswith("01 - What A Long Title ")
        assert len(name) == len("01 - ") + 50 + len(".pdf")

    def test_custom_extension(self):
        ranges = ranges_from_chapters([Chapter(0, "A")], 2, ext=".PDF")
        assert ranges[0].filename == "01 - A.PDF"

    def test_placeholder_for_title_with_only_illegal_characters(self):
        ranges = ranges_from_chapters([Chapter(0, "???"), Chapter(2, "Ok")], 5, placeholder="Chapter")
        assert [r.filename for r in ranges] == ["01 - Chapter.pdf", "02 - Ok.pdf"]

    def test_no_chapters_no_ranges(self):
        assert ranges_from_chapters([], 10) == []
