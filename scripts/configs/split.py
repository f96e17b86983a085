"""Split pipeline configuration."""

from shared.converter import CalibreConverter
from splitter import SplitConfig

from .common import DOWNLOAD_DIR, OUTPUT_ROOT  # noqa: F401

# --- Split-specific settings ---
DEFAULT_MODE = "1"      # "1" = chapters, "2" = sub-chapters, "manual" = page list

# --- Split configuration (composable) ---
config = SplitConfig(
    output_ext=".pdf",
    title_max_length=50,
    download_dir=DOWNLOAD_DIR,

    # Converter for AZW3/EPUB/MOBI inputs. Uncomment to override:
    # converter=CalibreConverter(binary="/Applications/calibre.app/Contents/MacOS/ebook-convert"),
    converter=CalibreConverter(timeout=600),
)
