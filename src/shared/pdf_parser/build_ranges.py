"""Turn chapters or a manual page list into contiguous output ranges."""

from __future__ import annotations

from ..errors import InvalidPageList
from .resolve_outline import UNTITLED
from .sanitize import MAX_TITLE_LENGTH, sanitize_title
from .types import Chapter, PageRange


def _build(
    starts: list[int],
    total_pages: int,
    name_for,
) -> list[PageRange]:
    """Pair each start with the next one (or ``total_pages``).

    ``name_for(i, start, end, index)`` returns the file name of a range;
    ``i`` is the position in ``starts`` and ``index`` the 1-based number
    among emitted ranges. Empty or inverted ranges are dropped and do not
    consume an index.
    """
    ranges: list[PageRange] = []
    for i, start in enumerate(starts):
        end = starts[i + 1] if i + 1 < len(starts) else total_pages
        if start >= end:
            print(f"  Dropping empty range at page {start + 1}")
            continue
        index = len(ranges) + 1
        ranges.append(PageRange(
            start=start,
            end=end,
            index=index,
            filename=name_for(i, start, end, index),
        ))
    return ranges


# ---------------------------------------------------------------------------
# Auto mode — bookmarks
# ---------------------------------------------------------------------------


def ranges_from_chapters(
    chapters: list[Chapter],
    total_pages: int,
    ext: str = ".pdf",
    max_title_length: int = MAX_TITLE_LENGTH,
    placeholder: str = UNTITLED,
) -> list[PageRange]:
    """One range per chapter, ending where the next chapter starts.

    ``chapters`` must already be sorted and deduplicated by page (see
    ``resolve_outline``). Titles that sanitize to nothing are
    named ``placeholder``.
    """
    def name_for(i, start, end, index):
        title = sanitize_title(
            chapters[i].title, max_length=max_title_length, placeholder=placeholder,
        )
        return f"{index:02d} - {title}{ext}"

    return _build([c.page for c in chapters], total_pages, name_for)


# ---------------------------------------------------------------------------
# Manual mode — user page list
# ---------------------------------------------------------------------------


def parse_page_list(text: str | None) -> list[int]:
    """Parse ``"13, 50, 88"`` into a list of integers.

    Tokens that are not non-negative whole numbers are skipped and
    reported.

    Raises:
        InvalidPageList: no token survived.
    """
    numbers: list[int] = []
    rejected: list[str] = []
    for token in (text or "").split(","):
        token = token.strip()
        if not token:
            continue
        if token.isascii() and token.isdigit():
            numbers.append(int(token))
        else:
            rejected.append(token)

    if rejected:
        print(f"  Ignoring invalid page numbers: {', '.join(rejected)}")
    if not numbers:
        raise InvalidPageList(text or "", f"No valid page numbers in {text!r}")
    return numbers


def split_points(page_numbers: list[int], total_pages: int) -> list[int]:
    """Convert 1-based start pages into sorted, unique 0-based split indices.

    Index 0 is always present: it is synthesized when page 1 was not
    listed. User pages that fall on 0 or below, or at or past the end of
    the document, are discarded.
    """
    nums = sorted(page_numbers)
    indices = [n - 1 for n in nums]

    points = set()
    if 1 not in nums:
        points.add(0)

    for idx in indices:
        if idx == 0 or 0 < idx < total_pages:
            points.add(idx)
        else:
            print(f"  Page {idx + 1} is out of range (1-{total_pages}), skipped")
    return sorted(points)


def ranges_from_page_list(
    text: str | None,
    total_pages: int,
    ext: str = ".pdf",
) -> list[PageRange]:
    """Build ranges from a comma-separated list of 1-based start pages.

    Raises:
        InvalidPageList: the list contains no usable numbers.
    """
    starts = split_points(parse_page_list(text), total_pages)

    def name_for(i, start, end, index):
        return f"{index:02d} - Section (Page {start + 1}-{end}){ext}"

    return _build(starts, total_pages, name_for)
