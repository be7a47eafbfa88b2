"""Reading search input from disk."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """Base exception for input reading errors."""


class SourceNotFoundError(SourceError):
    """Raised when the input file does not exist."""


class SourceReadError(SourceError):
    """Raised when the input file exists but cannot be read."""


class SourceDecodeError(SourceError):
    """Raised when the input file is not valid UTF-8 text."""


def read_text(path: Path) -> str:
    """
    Read the whole of *path* as UTF-8 text.

    Args:
        path: File to read.

    Returns:
        File contents, newlines untranslated.

    Raises:
        SourceNotFoundError: If the file does not exist.
        SourceReadError: If the path is a directory or otherwise unreadable.
        SourceDecodeError: If the contents are not valid UTF-8.
    """
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        msg = f"No such file: {path}"
        raise SourceNotFoundError(msg) from e
    except OSError as e:
        msg = f"Cannot read {path}: {e.strerror or e}"
        raise SourceReadError(msg) from e

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"{path} is not valid UTF-8 text (byte {e.start})"
        raise SourceDecodeError(msg) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return text
