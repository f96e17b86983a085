"""Copy a page range of an open PDF into a standalone file."""

from __future__ import annotations

import os
import tempfile

import pymupdf


def extract_slice(
    doc: pymupdf.Document,
    start: int,
    end: int,
    dest_path: str,
) -> str:
    """Write pages ``[start, end)`` of ``doc`` to ``dest_path``.

    The new document is saved to a temporary file next to ``dest_path`` and
    renamed over it, so a failed write never leaves a truncated file at the
    final path. An existing file at ``dest_path`` is replaced. ``doc`` is
    only read.

    Returns the destination path.
    """
    total_pages = len(doc)
    if not 0 <= start < end <= total_pages:
        raise ValueError(
            f"Invalid page range [{start}, {end}) for a {total_pages}-page document"
        )

    print(f"  Writing pages {start + 1}-{end} → {dest_path}")

    dest_dir = os.path.dirname(os.path.abspath(dest_path))
    out = pymupdf.open()
    try:
        out.insert_pdf(doc, from_page=start, to_page=end - 1)
        fd, tmp_path = tempfile.mkstemp(
            dir=dest_dir, prefix=".split-", suffix=".pdf.part"
        )
        os.close(fd)
        try:
            out.save(tmp_path, garbage=3, deflate=True)
            os.replace(tmp_path, dest_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
    finally:
        out.close()

    return dest_path
