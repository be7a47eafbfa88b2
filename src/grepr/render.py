"""Terminal rendering of search results."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from grepr.searcher import SearchResult

COLOR_CHOICES = ("auto", "always", "never")


class Ansi:
    """ANSI escape sequences used for emphasis."""

    BOLD_RED = "\033[1;31m"
    RESET = "\033[0m"


def should_use_color(choice: str, stream: TextIO) -> bool:
    """
    Resolve a ``--color`` choice against the output stream.

    Args:
        choice: One of "auto", "always" or "never".
        stream: Stream the results will be written to.

    Returns:
        True if output should carry ANSI emphasis. "auto" enables color only
        for a TTY and only when ``NO_COLOR`` is unset.
    """
    if choice == "always":
        return True
    if choice == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def highlight(line: str, query: str) -> str:
    """Wrap every literal, case-sensitive occurrence of *query* in *line*."""
    if not query:
        return line
    return line.replace(query, f"{Ansi.BOLD_RED}{query}{Ansi.RESET}")


def render_result(
    result: SearchResult,
    *,
    color: bool = False,
    number_base: int = 0,
) -> Iterator[str]:
    """
    Format each reported line as ``"{line_number}: {line}"``.

    Emphasis uses the original query as typed, so with ``ignore_case`` a line
    can be reported without any highlighted span.

    Args:
        result: Completed search result.
        color: Emphasize query occurrences with ANSI escapes.
        number_base: Added to each 0-based line number (0 or 1).
    """
    for match in result:
        line = highlight(match.line, result.query) if color else match.line
        yield f"{match.line_number + number_base}: {line}"


def write_result(
    result: SearchResult,
    stream: TextIO,
    *,
    color: bool = False,
    number_base: int = 0,
) -> int:
    """Write rendered lines to *stream* and return how many were written."""
    count = 0
    for text in render_result(result, color=color, number_base=number_base):
        stream.write(text + "\n")
        count += 1
    return count
