"""Filesystem utility functions."""

import sys
from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def read_text(path: Path | None = None) -> str:
    """
    Read a UTF-8 text document, or standard input when no path is given.

    Args:
        path: Path to text file, or None for stdin

    Returns:
        Document contents
    """
    if path is None:
        return sys.stdin.read()
    ensure_exists(path, "input document")
    return path.read_text(encoding="utf-8")
