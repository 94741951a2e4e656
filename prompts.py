"""Interactive confirmation gate shared by the destructive commands."""

from __future__ import annotations

from typing import Callable

AFFIRMATIVE = "y"

PROMPT = "Do you want to proceed? Press [Y(yes)] to confirm, or any other key to abort."


def confirm(answer: str | None) -> bool:
    """Return True only when ``answer`` is an affirmative token."""
    if answer is None:
        return False
    return answer.lower() == AFFIRMATIVE


def ask_confirmation(input_func: Callable[[str], str] | None = None) -> bool:
    print(PROMPT)
    try:
        answer = (input_func or input)("")
    except EOFError:
        answer = ""
    if not confirm(answer):
        print("Operation aborted by the user.")
        return False
    print()
    return True
