"""
Utility functions for talking to the operator.

This module provides helpers to abort with a tool-prefixed error message and to
ask a yes/no question on the terminal.

Functions:
    - die: Prints an error message prefixed with the tool name to stderr and
      terminates the process.
    - ask_yes_no: Asks a question and reports whether the answer was affirmative.
"""
import sys

from tvshow.utils.constants import TOOL_NAME
from tvshow.utils.logger import safe_print


def die(message: str, code: int = 1):
    """Print an error message to stderr and exit with `code`."""
    safe_print(f"{TOOL_NAME}: {message}", file=sys.stderr)
    sys.exit(code)


def ask_yes_no(question: str) -> bool:
    """Ask a y/n question; only an explicit "y" or "yes" counts as agreement."""
    try:
        answer = input(f"{question} (y/n): ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")
