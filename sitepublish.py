"""Command line interface for sitepublish.

Three independent commands support publishing a static site:

``clean``
    delete every file and folder in the target directory except the
    configured exclude lists.
``sanitize``
    prepare generated HTML templates for publication in staging.
``days``
    print the number of days since 2000-01-01 and copy it to the clipboard.

Examples
--------
Clean the current directory while keeping ``config.txt`` and ``assets``::

    python sitepublish.py clean --exclude-file config.txt --exclude-dir assets
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cleaner import ExcludeList, run_clean
from day_counter import run_days
from sanitizer import run_sanitize


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Static site publication helpers")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    clean = sub.add_parser(
        "clean",
        help="This command will delete all files and folders except those defined",
    )
    clean.add_argument("--path", default=".", help="Directory to clean")
    clean.add_argument(
        "--exclude-file",
        action="append",
        default=None,
        help="File name to keep (repeatable, replaces the defaults)",
    )
    clean.add_argument(
        "--exclude-dir",
        action="append",
        default=None,
        help="Directory name to keep (repeatable, replaces the defaults)",
    )

    sanitize = sub.add_parser(
        "sanitize",
        help="This command will prepare templates for publication in staging",
    )
    sanitize.add_argument("--path", default=".", help="Directory holding the HTML files")
    sanitize.add_argument(
        "--progress", action="store_true", help="Show a progress bar while scanning"
    )

    sub.add_parser(
        "days",
        help="Copy the number of days since 2000-01-01 to the clipboard",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "clean":
            excludes = ExcludeList.from_names(args.exclude_file, args.exclude_dir)
            return run_clean(Path(args.path).resolve(), excludes)
        if args.command == "sanitize":
            return run_sanitize(Path(args.path).resolve(), show_progress=args.progress)
        return run_days()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI
    raise SystemExit(main())
