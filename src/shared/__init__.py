from .converter import CalibreConverter, convert_to_pdf, converter_preflight
from .errors import (
    ConversionFailed,
    InvalidPageList,
    NoBookmarksFound,
    SliceWriteFailed,
    UnreadableSource,
)
from .extract import InputSource, prepare_source, resolve_input

__all__ = [
    "InputSource",
    "prepare_source",
    "resolve_input",
    "CalibreConverter",
    "convert_to_pdf",
    "converter_preflight",
    "ConversionFailed",
    "InvalidPageList",
    "NoBookmarksFound",
    "SliceWriteFailed",
    "UnreadableSource",
]
