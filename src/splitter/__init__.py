from .config import SplitConfig
from .split import (
    MANUAL,
    SplitResult,
    SplitStatus,
    open_document,
    parse_mode,
    plan_ranges,
    split_document,
    write_ranges,
)

__all__ = [
    "SplitConfig",
    "SplitResult",
    "SplitStatus",
    "MANUAL",
    "open_document",
    "parse_mode",
    "plan_ranges",
    "split_document",
    "write_ranges",
]
