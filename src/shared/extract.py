"""Input resolution — local path or URL to a PDF ready for splitting.

Ebooks (AZW3/EPUB/MOBI) are transcoded to PDF first via the external
converter.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from urllib.parse import unquote, urlparse

import requests

from .converter import EBOOK_SUFFIXES, CalibreConverter, convert_to_pdf, is_ebook
from .errors import UnreadableSource


@dataclass
class InputSource:
    """Resolved input — a local PDF or a local ebook that needs converting."""

    kind: str  # "pdf" or "ebook"
    path: str  # local file path


def _kind_for(path: str) -> str:
    return "ebook" if is_ebook(path) else "pdf"


def _download(url: str, dest_dir: str, default_ext: str) -> str:
    """Download ``url`` into ``dest_dir``, reusing an earlier download."""
    url_path = urlparse(url).path
    filename = os.path.basename(unquote(url_path)) or f"download{default_ext}"
    if not filename.lower().endswith((".pdf", *EBOOK_SUFFIXES)):
        filename += default_ext
    # Sanitise filename
    filename = re.sub(r"[^\w.\-]", "_", filename)

    os.makedirs(dest_dir, exist_ok=True)
    local_path = os.path.join(dest_dir, filename)

    if os.path.isfile(local_path):
        print(f"Using cached download: {local_path}")
        return local_path

    print(f"Downloading: {url}")
    try:
        resp = requests.get(url, timeout=120, stream=True)
        resp.raise_for_status()
        with open(local_path, "wb") as f:
            for chunk in resp.iter_content(chunk_size=1 << 20):
                f.write(chunk)
    except requests.RequestException as exc:
        if os.path.exists(local_path):
            os.remove(local_path)
        raise UnreadableSource(f"Failed to download {url}: {exc}") from exc
    size_mb = os.path.getsize(local_path) / (1 << 20)
    print(f"Saved to {local_path} ({size_mb:.1f} MB)")
    return local_path


def resolve_input(value: str, dest_dir: str = "inputs") -> InputSource:
    """Detect whether *value* is a local path, a PDF URL, or an ebook URL.

    - Local path → ``InputSource("pdf" | "ebook", value)`` by suffix
    - URL ending in .pdf, or serving ``application/pdf`` → download to
      *dest_dir*, ``InputSource("pdf", local_path)``
    - URL ending in an ebook suffix → download, ``InputSource("ebook", ...)``

    Raises:
        UnreadableSource: the URL serves neither a PDF nor an ebook, or the
            download fails.
    """
    if not value.startswith(("http://", "https://")):
        return InputSource(_kind_for(value), value)

    # Rewrite GitHub blob URLs to raw URLs so we get the actual file
    # e.g. github.com/.../blob/main/f.pdf → raw.githubusercontent.com/.../main/f.pdf
    gh_blob = re.match(
        r"https?://github\.com/([^/]+/[^/]+)/blob/(.+)", value
    )
    if gh_blob:
        value = f"https://raw.githubusercontent.com/{gh_blob.group(1)}/{gh_blob.group(2)}"
        print(f"Resolved GitHub URL → {value}")

    lowered = urlparse(value).path.lower()
    if lowered.endswith(EBOOK_SUFFIXES):
        return InputSource("ebook", _download(value, dest_dir, ".epub"))

    # Determine content type with a HEAD request
    is_pdf = lowered.endswith(".pdf")
    if not is_pdf:
        try:
            resp = requests.head(value, allow_redirects=True, timeout=10)
            content_type = resp.headers.get("Content-Type", "")
            is_pdf = "application/pdf" in content_type
        except requests.RequestException:
            pass  # reported below as not a PDF

    if not is_pdf:
        raise UnreadableSource(f"URL does not serve a PDF or ebook: {value}")
    return InputSource("pdf", _download(value, dest_dir, ".pdf"))


def prepare_source(
    value: str,
    dest_dir: str = "inputs",
    converter: CalibreConverter | None = None,
) -> str:
    """Resolve *value* and return the path of a local PDF.

    Raises:
        UnreadableSource: the input cannot be fetched or does not exist.
        ConversionFailed: an ebook could not be transcoded.
    """
    source = resolve_input(value, dest_dir=dest_dir)
    if not os.path.isfile(source.path):
        raise UnreadableSource(f"Input file not found: {source.path}")
    if source.kind == "ebook":
        return convert_to_pdf(source.path, converter=converter, dest_dir=dest_dir)
    return source.path
