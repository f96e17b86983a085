"""Shared fixtures and path setup for the test suite."""

import sys
from pathlib import Path

import pymupdf
import pytest

# Mirror the sys.path setup used by the split script
_APP = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_APP / "src"))
sys.path.insert(0, str(_APP / "scripts"))


# ---------------------------------------------------------------------------
# Converter preflight is cached per binary — reset between tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_converter_cache():
    yield
    from shared.converter import _converter_verified
    _converter_verified.clear()


# ---------------------------------------------------------------------------
# Real in-memory PDFs: page i carries the text "Page i" (1-based)
# ---------------------------------------------------------------------------

@pytest.fixture
def make_pdf(tmp_path):
    """Factory: ``make_pdf(pages, toc=None, name="book.pdf") -> path``.

    ``toc`` uses PyMuPDF's ``[level, title, page_1based]`` format.
    """
    def _make(pages, toc=None, name="book.pdf"):
        doc = pymupdf.open()
        for i in range(pages):
            page = doc.new_page()
            page.insert_text((72, 72), f"Page {i + 1}")
        if toc:
            doc.set_toc(toc)
        path = tmp_path / name
        doc.save(str(path))
        doc.close()
        return str(path)

    return _make


@pytest.fixture
def page_texts():
    """Return a reader for the stripped text of every page of a PDF."""
    def _read(pdf_path):
        doc = pymupdf.open(pdf_path)
        try:
            return [page.get_text().strip() for page in doc]
        finally:
            doc.close()

    return _read
