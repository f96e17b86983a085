"""Split a document into one PDF per chapter or per manual page range.

Auto mode resolves bookmarks at a given outline depth; manual mode takes a
comma-separated list of 1-based start pages. The source is opened once and
every range is extracted sequentially; a failing range is recorded and the
remaining ranges are still attempted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Literal

import pymupdf

from shared.errors import (
    ConversionFailed,
    InvalidPageList,
    NoBookmarksFound,
    SliceWriteFailed,
    UnreadableSource,
)
from shared.extract import prepare_source
from shared.pdf_parser import (
    PageRange,
    extract_slice,
    ranges_from_chapters,
    ranges_from_page_list,
    read_outline,
    resolve_outline,
)

from .config import SplitConfig

MANUAL = "manual"

# MuPDF raises its own error hierarchy, which does not derive from RuntimeError
PDF_ERRORS = (RuntimeError, ValueError, OSError, pymupdf.mupdf.FzErrorBase)

SplitStatus = Literal[
    "success",
    "no_bookmarks",
    "invalid_page_list",
    "unreadable_source",
    "conversion_failed",
]


@dataclass
class SplitResult:
    """Outcome of one split run.

    ``status`` distinguishes the recoverable outcomes (``no_bookmarks``,
    ``invalid_page_list``) from fatal ones and from success. Per-range
    write failures do not change the status; they are listed in
    ``failures``.
    """

    status: SplitStatus
    ranges: list[PageRange] = field(default_factory=list)
    written: list[str] = field(default_factory=list)
    failures: list[SliceWriteFailed] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "success" and not self.failures


def parse_mode(mode: str | int) -> int | None:
    """Return the outline depth for ``mode``, or None for manual mode.

    ``"1"`` and ``"2"`` select top-level and second-level bookmarks; any
    other positive integer selects a deeper level.
    """
    text = str(mode).strip().lower()
    if text == MANUAL:
        return None
    if text.isdigit() and int(text) >= 1:
        return int(text)
    raise ValueError(f"Unknown mode {mode!r}: expected '1', '2' or 'manual'")


def open_document(pdf_path: str) -> pymupdf.Document:
    """Open a PDF read-only for splitting.

    Raises:
        UnreadableSource: the file is missing, corrupt, encrypted, or empty.
    """
    try:
        doc = pymupdf.open(pdf_path)
    except PDF_ERRORS as exc:
        raise UnreadableSource(f"Cannot open {pdf_path}: {exc}") from exc

    problem = None
    if doc.needs_pass:
        problem = "document is encrypted"
    elif not doc.is_pdf:
        problem = "not a PDF"
    elif len(doc) == 0:
        problem = "document has no pages"
    if problem:
        doc.close()
        raise UnreadableSource(f"Cannot split {pdf_path}: {problem}")
    return doc


def plan_ranges(
    doc: pymupdf.Document,
    mode: str | int,
    pages: str | None = None,
    config: SplitConfig | None = None,
) -> list[PageRange]:
    """Resolve the output ranges for ``doc`` without writing anything.

    In auto mode, ``pages`` (when given) is used as the manual fallback if
    the outline has no bookmarks at the requested depth.

    Raises:
        NoBookmarksFound: auto mode found nothing and no fallback was given.
        InvalidPageList: the manual page list has no usable numbers.
    """
    config = config or SplitConfig()
    total_pages = len(doc)
    depth = parse_mode(mode)

    if depth is not None:
        try:
            chapters = resolve_outline(
                read_outline(doc),
                depth,
                total_pages=total_pages,
                placeholder=config.untitled_title,
            )
        except NoBookmarksFound as exc:
            if pages is None:
                raise
            print(f"  {exc} — falling back to manual page list")
        else:
            print(f"  Found {len(chapters)} chapters at depth {depth}")
            return ranges_from_chapters(
                chapters,
                total_pages,
                ext=config.output_ext,
                max_title_length=config.title_max_length,
                placeholder=config.untitled_title,
            )

    return ranges_from_page_list(pages, total_pages, ext=config.output_ext)


def write_ranges(
    doc: pymupdf.Document,
    ranges: list[PageRange],
    output_dir: str,
) -> tuple[list[str], list[SliceWriteFailed]]:
    """Extract every range in order; collect failures instead of stopping."""
    os.makedirs(output_dir, exist_ok=True)
    written: list[str] = []
    failures: list[SliceWriteFailed] = []
    for rng in ranges:
        dest = os.path.join(output_dir, rng.filename)
        try:
            written.append(extract_slice(doc, rng.start, rng.end, dest))
        except PDF_ERRORS as exc:
            failure = SliceWriteFailed(rng.index, dest, exc)
            print(f"  ERROR: {failure}")
            failures.append(failure)
    return written, failures


def split_document(
    source: str,
    mode: str | int,
    output_dir: str,
    pages: str | None = None,
    config: SplitConfig | None = None,
    dry_run: bool = False,
) -> SplitResult:
    """Split ``source`` (a PDF/ebook path or URL) into ``output_dir``.

    Args:
        source: Local path or URL of a PDF, AZW3, EPUB or MOBI file.
        mode: ``"1"``/``"2"`` for bookmark depth, ``"manual"`` for a page list.
        output_dir: Directory for the generated files (created if missing).
        pages: Comma-separated 1-based start pages. Required in manual mode;
               in auto mode it is the fallback when no bookmarks are found.
        config: Output naming and converter settings.
        dry_run: Resolve and report the ranges without writing files.

    Returns:
        SplitResult. Unexpected errors propagate.
    """
    config = config or SplitConfig()
    depth = parse_mode(mode)

    try:
        pdf_path = prepare_source(
            source, dest_dir=config.download_dir, converter=config.converter,
        )
        doc = open_document(pdf_path)
    except ConversionFailed as exc:
        print(f"ERROR: {exc}")
        return SplitResult("conversion_failed", message=str(exc))
    except UnreadableSource as exc:
        print(f"ERROR: {exc}")
        return SplitResult("unreadable_source", message=str(exc))

    try:
        print(f"PDF: {pdf_path} ({len(doc)} pages)")
        print(f"Mode: {'manual page list' if depth is None else f'bookmarks at depth {depth}'}")
        try:
            ranges = plan_ranges(doc, mode, pages=pages, config=config)
        except NoBookmarksFound as exc:
            print(f"  {exc}")
            return SplitResult("no_bookmarks", message=str(exc))
        except InvalidPageList as exc:
            print(f"ERROR: {exc}")
            return SplitResult("invalid_page_list", message=str(exc))

        print(f"\nOutput files ({len(ranges)}):\n")
        for rng in ranges:
            print(f"  {rng.filename} (p.{rng.start + 1}-{rng.end}, {rng.page_count} pages)")

        if dry_run:
            return SplitResult("success", ranges=ranges, message="dry run")

        print()
        written, failures = write_ranges(doc, ranges, output_dir)
    finally:
        doc.close()

    message = f"{len(written)} of {len(ranges)} files written to {output_dir}"
    print(f"\n{message}")
    if failures:
        print(f"{len(failures)} ranges failed:")
        for failure in failures:
            print(f"  {failure.index:02d}. {failure}")
    return SplitResult(
        "success",
        ranges=ranges,
        written=written,
        failures=failures,
        message=message,
    )
