"""Shared dataclasses for outline resolution and range building."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OutlineNode:
    """One bookmark in the outline tree.

    The tree root is a synthetic node (``title=None``, ``page=None``) whose
    children are the top-level bookmarks.
    """

    title: str | None = None
    page: int | None = None  # 0-indexed; None when the destination did not resolve
    children: tuple[OutlineNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Chapter:
    page: int  # 0-indexed
    title: str


@dataclass(frozen=True)
class PageRange:
    """A half-open page interval ``[start, end)`` destined for one output file."""

    start: int  # inclusive, 0-indexed
    end: int  # exclusive, 0-indexed
    index: int  # 1-based position among emitted ranges
    filename: str

    @property
    def page_count(self) -> int:
        return self.end - self.start
