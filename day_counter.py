"""Day counter with a clipboard side effect."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from datetime import date
from typing import Callable, List, Optional

REFERENCE_DATE = date(2000, 1, 1)

# Linux candidates, tried in order
_UNIX_CLIPBOARD_COMMANDS: List[List[str]] = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


class ClipboardError(RuntimeError):
    """Raised when the system clipboard cannot be written."""


def days_since(today: Optional[date] = None, reference: date = REFERENCE_DATE) -> int:
    """Return the whole days elapsed between ``reference`` and ``today``."""
    if today is None:
        today = date.today()
    return (today - reference).days


def clipboard_command() -> Optional[List[str]]:
    """Return the command line of the platform clipboard utility, if any."""
    system = platform.system()
    if system == "Darwin":
        return ["pbcopy"]
    if system == "Windows":
        return ["clip"]
    for command in _UNIX_CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


def write_clipboard(text: str) -> None:
    """Copy ``text`` to the system clipboard."""
    command = clipboard_command()
    if command is None:
        raise ClipboardError("no clipboard utility found")
    try:
        subprocess.run(command, input=text, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ClipboardError(f"{command[0]} failed: {exc}") from exc


def run_days(
    today: Optional[date] = None,
    clipboard: Callable[[str], None] = write_clipboard,
) -> int:
    """Handle the ``days`` command. Clipboard failures are not fatal."""
    value = str(days_since(today))
    try:
        clipboard(value)
    except ClipboardError as exc:
        logging.warning("Clipboard write failed: %s", exc)
        print(f"{value} (could not copy to clipboard: {exc})")
        return 0
    print(f"{value} (copied to clipboard)")
    return 0
