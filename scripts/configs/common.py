"""Shared configuration — defaults and helpers used by the split script."""

import sys
from pathlib import Path

# Add src/ to Python path (needed before importing config.* dataclasses)
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "src"))

from shared.extract import InputSource, resolve_input  # noqa: E402, F401

# --- Shared defaults ---
DOWNLOAD_DIR = "inputs"     # downloaded URLs and converted ebooks
OUTPUT_ROOT = "output"      # parent of per-run output directories


def fmt_time(seconds):
    """Format seconds as HH:MM:SS."""
    h, remainder = divmod(int(seconds), 3600)
    m, s = divmod(remainder, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


class TeeLogger:
    """Duplicate stdout to a log file."""
    def __init__(self, log_path):
        self.terminal = sys.stdout
        self.log = open(log_path, "a", buffering=1)  # noqa: SIM115
    def write(self, msg):
        self.terminal.write(msg)
        self.log.write(msg)
    def flush(self):
        self.terminal.flush()
        self.log.flush()
    def close(self):
        self.log.close()
