"""Ebook → PDF transcoding through an external converter (Calibre).

The converter is an external collaborator: this module only checks that
it is installed, runs it, and reports failures as ConversionFailed.
"""

from __future__ import annotations

import hashlib
import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field

from .errors import ConversionFailed

EBOOK_SUFFIXES = (".azw3", ".epub", ".mobi")


@dataclass
class CalibreConverter:
    binary: str = "ebook-convert"
    timeout: int | None = 600                   # seconds; None = no limit
    extra_args: list[str] = field(default_factory=list)


def is_ebook(path: str) -> bool:
    return path.lower().endswith(EBOOK_SUFFIXES)


# Binaries already located on PATH — preflight runs once per binary
_converter_verified: dict[str, str] = {}


def converter_preflight(converter: CalibreConverter) -> str:
    """Locate the converter binary and return its full path.

    Raises:
        ConversionFailed: the binary is not installed.
    """
    if converter.binary in _converter_verified:
        return _converter_verified[converter.binary]

    found = shutil.which(converter.binary)
    if found is None:
        raise ConversionFailed(
            f"Converter {converter.binary!r} not found on PATH — "
            "install Calibre (https://calibre-ebook.com) to split ebooks"
        )
    _converter_verified[converter.binary] = found
    return found


def _discard(path: str) -> None:
    """Remove a half-written conversion."""
    if os.path.exists(path):
        os.remove(path)


def converted_name(path: str) -> str:
    """File name of the converted PDF for ``path``.

    The name carries a digest of the source's absolute path, size and
    modification time, so different sources sharing a stem, or an edited
    source, never reuse each other's conversion.
    """
    stem = os.path.splitext(os.path.basename(path))[0]
    key = os.path.abspath(path)
    if os.path.isfile(path):
        st = os.stat(path)
        key = f"{key}:{st.st_size}:{st.st_mtime_ns}"
    digest = hashlib.sha1(key.encode("utf-8")).hexdigest()[:10]
    return f"{stem}.{digest}.converted.pdf"


def convert_to_pdf(
    path: str,
    converter: CalibreConverter | None = None,
    dest_dir: str = "inputs",
) -> str:
    """Convert an ebook to PDF and return the PDF path.

    The converter writes to a temporary file that is renamed into place
    only after a successful run. A PDF converted from the same source by
    an earlier run is reused.

    Raises:
        ConversionFailed: the converter is missing, exits non-zero, times
            out, or produces no output.
    """
    converter = converter or CalibreConverter()
    os.makedirs(dest_dir, exist_ok=True)
    pdf_path = os.path.join(dest_dir, converted_name(path))

    if os.path.isfile(pdf_path):
        print(f"Using converted PDF: {pdf_path}")
        return pdf_path

    binary = converter_preflight(converter)
    # ebook-convert picks the output format from the extension
    fd, tmp_path = tempfile.mkstemp(dir=dest_dir, prefix=".convert-", suffix=".pdf")
    os.close(fd)
    os.remove(tmp_path)

    cmd = [binary, path, tmp_path, *converter.extra_args]
    print(f"Converting {path} → {pdf_path}")
    try:
        try:
            proc = subprocess.run(
                cmd, capture_output=True, text=True, timeout=converter.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ConversionFailed(
                f"{converter.binary} timed out after {converter.timeout}s on {path}"
            ) from exc
        except OSError as exc:
            raise ConversionFailed(f"Could not run {converter.binary}: {exc}") from exc

        if proc.returncode != 0:
            detail = (proc.stderr or proc.stdout or "").strip()[-500:]
            raise ConversionFailed(
                f"{converter.binary} exited with code {proc.returncode}: {detail}"
            )
        if not os.path.isfile(tmp_path) or os.path.getsize(tmp_path) == 0:
            raise ConversionFailed(f"{converter.binary} produced no output for {path}")
        os.replace(tmp_path, pdf_path)
    except BaseException:
        _discard(tmp_path)
        raise

    print(f"  Converted ({os.path.getsize(pdf_path) / (1 << 20):.1f} MB)")
    return pdf_path
