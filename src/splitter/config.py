"""Split pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass

from shared.converter import CalibreConverter
from shared.pdf_parser import MAX_TITLE_LENGTH, UNTITLED


@dataclass
class SplitConfig:
    """Top-level split pipeline configuration.

    Composes output naming and the ebook converter config.
    """

    output_ext: str = ".pdf"
    title_max_length: int = MAX_TITLE_LENGTH   # chars kept from a bookmark title
    untitled_title: str = UNTITLED             # name for bookmarks without a title
    download_dir: str = "inputs"               # downloaded and converted inputs
    converter: CalibreConverter | None = None

    def __post_init__(self):
        if self.converter is None:
            self.converter = CalibreConverter()
        if not self.output_ext.startswith("."):
            self.output_ext = f".{self.output_ext}"
