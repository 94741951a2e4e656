"""Pre-publication cleanup: delete everything in a folder except an allow-list.

The exclude names are compared case-insensitively against the entries found
directly under the target directory. Validation runs before anything is
touched; if any excluded name is missing the whole operation is abandoned.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List

from prompts import ask_confirmation


@dataclass(frozen=True)
class ExcludeList:
    """Names kept by :func:`clean_directory`."""

    files: tuple[str, ...] = ("appsettings.json", "web.config")
    directories: tuple[str, ...] = ("assets",)

    @classmethod
    def from_names(
        cls, files: Iterable[str] | None = None, directories: Iterable[str] | None = None
    ) -> "ExcludeList":
        """Build an exclude list, falling back to the defaults for ``None``."""
        default = cls()
        return cls(
            files=tuple(files) if files is not None else default.files,
            directories=tuple(directories) if directories is not None else default.directories,
        )

    def keeps_file(self, name: str) -> bool:
        return _folded(name) in {_folded(n) for n in self.files}

    def keeps_directory(self, name: str) -> bool:
        return _folded(name) in {_folded(n) for n in self.directories}


DEFAULT_EXCLUDES = ExcludeList()


def _folded(name: str) -> str:
    return name.casefold()


def _is_directory(path: Path) -> bool:
    # symlinked folders are removed as links, never traversed
    return path.is_dir() and not path.is_symlink()


def validate_excludes(directory: Path, excludes: ExcludeList) -> List[str]:
    """Return a list of problems preventing a safe cleanup of ``directory``.

    An empty list means every excluded file and directory exists.
    """
    if not directory.is_dir():
        return [f'Problem with the path to process "{directory}"']

    entries = list(directory.iterdir())
    files = {_folded(p.name) for p in entries if not _is_directory(p)}
    dirs = {_folded(p.name) for p in entries if _is_directory(p)}

    problems: List[str] = []
    for name in excludes.files:
        if _folded(name) not in files:
            problems.append(f'File to exclude "{name}" does not exist. Operation aborted.')
    for name in excludes.directories:
        if _folded(name) not in dirs:
            problems.append(f'Directory to exclude "{name}" does not exist. Operation aborted.')
    return problems


def clean_directory(directory: Path, excludes: ExcludeList) -> List[str]:
    """Delete top-level entries of ``directory`` not covered by ``excludes``.

    Files are removed first, then folders (recursively). Each deletion is
    printed as it happens and the deleted names are returned in order.
    """
    entries = sorted(directory.iterdir(), key=lambda p: p.name)
    deleted: List[str] = []

    for path in entries:
        if _is_directory(path) or excludes.keeps_file(path.name):
            continue
        path.unlink()
        logging.debug("Deleted file %s", path)
        print(f'File "{path.name}" deleted')
        deleted.append(path.name)

    for path in entries:
        if not _is_directory(path) or excludes.keeps_directory(path.name):
            continue
        shutil.rmtree(path)
        logging.debug("Deleted directory %s", path)
        print(f'Directory "{path.name}" deleted')
        deleted.append(path.name)

    return deleted


def run_clean(
    directory: Path,
    excludes: ExcludeList = DEFAULT_EXCLUDES,
    input_func: Callable[[str], str] | None = None,
) -> int:
    """Handle the ``clean`` command. Returns the process exit code."""
    print()
    print(
        "This command will delete all files except "
        f"[{', '.join(excludes.files)}] and all folders except "
        f"[{', '.join(excludes.directories)}]"
    )

    problems = validate_excludes(directory, excludes)
    if problems:
        for problem in problems:
            print(problem)
        logging.info("Cleanup of %s rejected: %d problem(s)", directory, len(problems))
        return 1

    print()
    print(f'Folder "{directory}" located.')
    print()
    if not ask_confirmation(input_func):
        return 0

    deleted = clean_directory(directory, excludes)
    logging.info("Removed %d entries from %s", len(deleted), directory)
    print("Operation completed")
    return 0
