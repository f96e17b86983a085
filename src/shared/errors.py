"""Error taxonomy for the split pipeline.

NoBookmarksFound and InvalidPageList are recoverable: the caller can fall
back to a manual page list or re-prompt. ConversionFailed and
UnreadableSource abort the run before any range is written.
SliceWriteFailed is raised per range and collected by the pipeline.
"""

from __future__ import annotations


class NoBookmarksFound(LookupError):
    """The outline is missing or has no usable entries at the requested depth."""

    def __init__(self, depth: int | None = None, message: str | None = None):
        self.depth = depth
        if message is None:
            message = (
                "No bookmarks found" if depth is None
                else f"No bookmarks found at depth {depth}"
            )
        super().__init__(message)


class InvalidPageList(ValueError):
    """A manual page list contained no usable page numbers."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"Invalid page list: {text!r}")


class ConversionFailed(RuntimeError):
    """The external ebook converter is missing or exited with an error."""


class UnreadableSource(RuntimeError):
    """The source document cannot be opened or parsed."""


class SliceWriteFailed(RuntimeError):
    """Writing a single page range to disk failed."""

    def __init__(self, index: int, path: str, cause: BaseException):
        self.index = index
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")
