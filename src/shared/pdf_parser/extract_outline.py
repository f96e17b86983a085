"""Read the embedded bookmark tree from a PDF via PyMuPDF."""

from __future__ import annotations

import pymupdf

from .types import OutlineNode


def _page_0(page_1based) -> int | None:
    """Convert a TOC page number to 0-indexed, or None when it did not resolve.

    PyMuPDF reports unresolved or dangling destinations as 0 and external
    links as -1.
    """
    if not isinstance(page_1based, int) or page_1based < 1:
        return None
    return page_1based - 1


def _freeze(entry: dict) -> OutlineNode:
    return OutlineNode(
        title=entry["title"],
        page=entry["page"],
        children=tuple(_freeze(child) for child in entry["children"]),
    )


def build_outline(raw_toc: list) -> OutlineNode | None:
    """Nest a flat ``[level, title, page_1based, ...]`` TOC into a tree.

    Each entry becomes a child of the closest preceding entry with a lower
    level. Returns the synthetic root, or None for an empty TOC.
    """
    if not raw_toc:
        return None

    root = {"level": 0, "title": None, "page": None, "children": []}
    stack = [root]
    for item in raw_toc:
        level, title, page_1based = item[0], item[1], item[2]
        while len(stack) > 1 and stack[-1]["level"] >= level:
            stack.pop()
        entry = {
            "level": level,
            "title": title,
            "page": _page_0(page_1based),
            "children": [],
        }
        stack[-1]["children"].append(entry)
        stack.append(entry)
    return _freeze(root)


def read_outline(doc: pymupdf.Document) -> OutlineNode | None:
    """Build an OutlineNode tree from an open document.

    Returns the synthetic root node, or None when the document carries no
    bookmarks at all.
    """
    return build_outline(doc.get_toc(simple=False))


def extract_outline(pdf_path: str) -> OutlineNode | None:
    """Open a PDF, read its outline tree and close it again."""
    doc = pymupdf.open(pdf_path)
    try:
        return read_outline(doc)
    finally:
        doc.close()
