"""Select bookmarks at one outline depth and turn them into chapters."""

from __future__ import annotations

from ..errors import NoBookmarksFound
from .types import Chapter, OutlineNode

UNTITLED = "Untitled"


def _collect(
    node: OutlineNode,
    depth: int,
    target_depth: int,
    total_pages: int | None,
    placeholder: str,
) -> list[Chapter]:
    """Depth-first walk; returns the chapter candidates below ``node``.

    ``node`` itself sits at ``depth``; its children are at ``depth + 1``.
    """
    found: list[Chapter] = []
    for child in node.children:
        child_depth = depth + 1
        if child_depth == target_depth:
            page = child.page
            if page is not None and page >= 0 and (
                total_pages is None or page < total_pages
            ):
                title = (child.title or "").strip() or placeholder
                found.append(Chapter(page=page, title=title))
            else:
                print(f"  Skipping bookmark {child.title!r}: unresolved destination")
        elif child_depth < target_depth:
            found.extend(
                _collect(child, child_depth, target_depth, total_pages, placeholder)
            )
    return found


def dedupe_by_page(chapters: list[Chapter]) -> list[Chapter]:
    """Sort by page (stable) and keep the first chapter seen for each page."""
    unique: list[Chapter] = []
    seen: set[int] = set()
    for chapter in sorted(chapters, key=lambda c: c.page):
        if chapter.page in seen:
            continue
        seen.add(chapter.page)
        unique.append(chapter)
    return unique


def resolve_outline(
    outline_root: OutlineNode | None,
    target_depth: int,
    total_pages: int | None = None,
    placeholder: str = UNTITLED,
) -> list[Chapter]:
    """Resolve the bookmarks at exactly ``target_depth`` into chapters.

    Depth 1 is the top level of the outline. Bookmarks above or below the
    target depth are ignored, never promoted. Bookmarks whose destination
    does not resolve (or points past ``total_pages``) are dropped.

    Returns chapters sorted by page with one chapter per page.

    Raises:
        NoBookmarksFound: the outline is absent or yields no chapters.
    """
    if target_depth < 1:
        raise ValueError(f"Outline depth must be >= 1, got {target_depth}")
    if outline_root is None:
        raise NoBookmarksFound(target_depth, "Document has no bookmarks")

    candidates = _collect(outline_root, 0, target_depth, total_pages, placeholder)
    chapters = dedupe_by_page(candidates)
    if not chapters:
        raise NoBookmarksFound(target_depth)
    return chapters
