from .build_ranges import (
    parse_page_list,
    ranges_from_chapters,
    ranges_from_page_list,
    split_points,
)
from .extract_outline import build_outline, extract_outline, read_outline
from .extract_slice import extract_slice
from .resolve_outline import UNTITLED, dedupe_by_page, resolve_outline
from .sanitize import MAX_TITLE_LENGTH, sanitize_title
from .types import Chapter, OutlineNode, PageRange

__all__ = [
    "build_outline",
    "extract_outline",
    "read_outline",
    "resolve_outline",
    "dedupe_by_page",
    "ranges_from_chapters",
    "ranges_from_page_list",
    "parse_page_list",
    "split_points",
    "extract_slice",
    "sanitize_title",
    "MAX_TITLE_LENGTH",
    "UNTITLED",
    "Chapter",
    "OutlineNode",
    "PageRange",
]
