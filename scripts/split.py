#!/usr/bin/env python3
"""Split pipeline — PDF/ebook to one PDF per chapter or page range.

PDF/ebook → (ebook conversion) → bookmark or page-list resolution → page ranges → files.

Usage:
    uv run python scripts/split.py -i docs/book.pdf
    uv run python scripts/split.py -i docs/book.epub -m 2
    uv run python scripts/split.py -i docs/book.pdf -m manual -p "13, 50, 88"
    uv run python scripts/split.py -i docs/book.pdf -p "13, 50" # pages used if no bookmarks
    uv run python scripts/split.py -i https://example.com/book.pdf --dry-run

Configuration:
    Edit scripts/configs/split.py (output naming, converter)
    and scripts/configs/common.py (DOWNLOAD_DIR, OUTPUT_ROOT).
"""

import argparse
import os
import sys
import time
from datetime import datetime
from pathlib import Path

# Add src/ to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from configs.common import OUTPUT_ROOT, TeeLogger, fmt_time  # noqa: E402
from configs.split import DEFAULT_MODE, config  # noqa: E402

from splitter import MANUAL, split_document  # noqa: E402

# Exit codes — the sentinel outcomes are distinguishable from a crash
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
EXIT_NO_BOOKMARKS = 3
EXIT_INVALID_PAGES = 4

STATUS_EXIT_CODES = {
    "success": EXIT_OK,
    "no_bookmarks": EXIT_NO_BOOKMARKS,
    "invalid_page_list": EXIT_INVALID_PAGES,
    "unreadable_source": EXIT_FAILED,
    "conversion_failed": EXIT_FAILED,
}


def _build_parser():
    parser = argparse.ArgumentParser(
        description="Split a PDF or ebook into chapters or page ranges",
    )
    parser.add_argument("--input", "-i", required=True, help="Input PDF/AZW3/EPUB file or URL")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help=f"Output directory (default: {OUTPUT_ROOT}/<input name>)",
    )
    parser.add_argument(
        "--mode", "-m", default=DEFAULT_MODE,
        help="'1' = top-level bookmarks, '2' = second-level bookmarks, 'manual' = page list",
    )
    parser.add_argument(
        "--pages", "-p", default=None,
        help="Comma-separated 1-based pages where a new file starts "
             "(manual mode, or fallback when no bookmarks are found)",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Show the planned files without writing them",
    )
    return parser


def _prompt_pages():
    """Ask for a manual page list; None when stdin is not interactive."""
    if not sys.stdin.isatty():
        return None
    try:
        return input("Pages where a new file starts (e.g. 13, 50, 88): ")
    except EOFError:
        return None


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    output_dir = args.output or os.path.join(
        OUTPUT_ROOT, Path(args.input.rstrip("/")).stem or "split"
    )
    os.makedirs(output_dir, exist_ok=True)
    log_path = os.path.join(output_dir, f"split_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    tee = TeeLogger(log_path)
    sys.stdout = tee

    try:
        print("=" * 60)
        print(f"Input: {args.input}")
        print(f"Output: {output_dir}")
        print("=" * 60)

        t0 = time.time()
        try:
            result = split_document(
                args.input, args.mode, output_dir,
                pages=args.pages, config=config, dry_run=args.dry_run,
            )
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return EXIT_USAGE

        # Interactive fallback: no bookmarks → ask for pages, re-ask on bad input
        while result.status in ("no_bookmarks", "invalid_page_list"):
            if result.status == "no_bookmarks":
                print("\nNo usable bookmarks — switching to manual page list.")
            pages = _prompt_pages()
            if pages is None:
                break
            result = split_document(
                args.input, MANUAL, output_dir,
                pages=pages, config=config, dry_run=args.dry_run,
            )

        print(f"\nDone in {fmt_time(time.time() - t0)}")
        print(f"Log: {log_path}")

        if result.failures:
            return EXIT_FAILED
        return STATUS_EXIT_CODES[result.status]
    finally:
        sys.stdout = tee.terminal
        tee.close()


if __name__ == "__main__":
    sys.exit(main())
