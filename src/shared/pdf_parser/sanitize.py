"""Make bookmark titles safe to use as file names."""

import re

# Characters Windows rejects in file names, plus ASCII control characters
_ILLEGAL_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

MAX_TITLE_LENGTH = 50


def sanitize_title(
    title: str | None,
    max_length: int = MAX_TITLE_LENGTH,
    placeholder: str = "Untitled",
) -> str:
    """Strip illegal characters, trim whitespace and cap the length.

    Falls back to ``placeholder`` when nothing usable remains.
    """
    cleaned = _ILLEGAL_RE.sub("", title or "").strip()
    cleaned = cleaned[:max_length].rstrip()
    return cleaned or placeholder[:max_length]
