"""HTML file discovery for sitepublish."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from tqdm import tqdm


def scan_html_files(base_path: str | Path, show_progress: bool = False) -> List[Path]:
    """Recursively discover ``.html`` files under *base_path*.

    Parameters
    ----------
    base_path:
        Directory to search.
    show_progress:
        If True, display a progress bar while scanning.
    Returns
    -------
    list[Path]
        Paths to discovered HTML files, sorted. The extension check is
        case-insensitive, so ``PAGE.HTML`` is included.
    """
    base = Path(base_path)
    results: List[Path] = []

    walker = os.walk(base, topdown=True)
    if show_progress:
        walker = tqdm(walker, desc="Scanning HTML files")

    for root, _dirs, files in walker:
        root_path = Path(root)
        for name in files:
            if os.path.splitext(name)[1].lower() != ".html":
                continue
            results.append(root_path / name)

    return sorted(results)
