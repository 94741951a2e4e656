"""Prepare generated HTML pages for publication in staging.

Every ``.html`` file gets three raw-text substitutions before it is parsed.
Pages whose path ends with ``index.html`` additionally have root-relative
``.html`` links turned into relative ones.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, List

from bs4 import BeautifulSoup

from prompts import ask_confirmation
from scanner import scan_html_files

_SUBSTITUTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"/inc/", re.IGNORECASE), "inc/"),
    (re.compile(r'href="/"', re.IGNORECASE), 'href="index.html"'),
    (re.compile(r"\?id=[a-zA-Z0-9]+"), ""),
]


def substitute_text(text: str) -> str:
    """Apply the raw-text rewrites to ``text`` in order."""
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text


def is_index_page(path: Path | str) -> bool:
    return str(path).endswith("index.html")


def rewrite_index_anchors(soup: BeautifulSoup) -> int:
    """Strip the leading ``/`` from root-relative ``.html`` anchors.

    Returns the number of anchors changed.
    """
    count = 0
    for anchor in soup.find_all("a", href=True):
        href = str(anchor["href"])
        if href.startswith("/") and href.endswith(".html"):
            anchor["href"] = href[1:]
            count += 1
    return count


def sanitize_file(path: Path) -> None:
    """Rewrite ``path`` in place, keeping its line endings.

    I/O and decoding errors propagate to the caller.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = substitute_text(handle.read())
    soup = BeautifulSoup(text, "html.parser")
    if is_index_page(path):
        changed = rewrite_index_anchors(soup)
        logging.debug("Rewrote %d anchor(s) in %s", changed, path)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(str(soup))


def sanitize_directory(directory: Path, show_progress: bool = False) -> List[Path]:
    """Sanitize every HTML file below ``directory`` and return the paths."""
    processed: List[Path] = []
    for html_file in scan_html_files(directory, show_progress=show_progress):
        sanitize_file(html_file)
        print(html_file)
        processed.append(html_file)
    return processed


def run_sanitize(
    directory: Path,
    input_func: Callable[[str], str] | None = None,
    show_progress: bool = False,
) -> int:
    """Handle the ``sanitize`` command. Returns the process exit code."""
    print()
    print("This command will prepare templates for publication in staging")
    print()

    if not directory.is_dir():
        print(f'Problem with the path to process "{directory}"')
        return 1

    print(f'Folder "{directory}" located.')
    print()
    if not ask_confirmation(input_func):
        return 0

    processed = sanitize_directory(directory, show_progress=show_progress)
    logging.info("Sanitized %d HTML file(s) under %s", len(processed), directory)
    print(directory)
    print("Operation completed")
    return 0
