"""Line-by-line search over an in-memory text buffer."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from grepr.matcher import SearchOptions, fold_case, matches

logger = logging.getLogger(__name__)


def iter_lines(text: str) -> Iterator[str]:
    """Yield the ``\\n``-delimited lines of *text*.

    A trailing newline does not produce an extra empty line and empty text
    yields nothing. Carriage returns are kept as part of the line.
    """
    start = 0
    end = len(text)
    while start < end:
        newline = text.find("\n", start)
        if newline == -1:
            yield text[start:]
            return
        yield text[start:newline]
        start = newline + 1


@dataclass(frozen=True)
class LineMatch:
    """A reported line and its 0-based position in the source text."""

    line_number: int
    line: str


@dataclass
class SearchResult:
    """Reported lines of a single search, in ascending line order."""

    query: str
    options: SearchOptions
    matches: list[LineMatch] = field(default_factory=list)
    total_lines: int = 0

    def __iter__(self) -> Iterator[LineMatch]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    @property
    def line_numbers(self) -> list[int]:
        """0-based numbers of the reported lines, in scan order."""
        return [m.line_number for m in self.matches]


class SearchEngine:
    """
    Scans text line by line and collects the lines selected by the options.

    The engine holds only its options; every call to :meth:`run` is
    independent and leaves its inputs untouched.
    """

    def __init__(self, options: SearchOptions) -> None:
        """
        Initialize engine.

        Args:
            options: Match mode, case handling and inversion for each run.
        """
        self.options = options

    def run(self, text: str, query: str) -> SearchResult:
        """
        Search *text* for *query*.

        Args:
            text: Full source text.
            query: Search string; may be empty.

        Returns:
            SearchResult with one entry per reported line, 0-based line numbers.
        """
        options = self.options
        folded_query = fold_case(query, options.ignore_case)
        result = SearchResult(query=query, options=options)

        line_count = 0
        for index, line in enumerate(iter_lines(text)):
            line_count += 1
            raw = matches(folded_query, line, options, folded=True)
            if raw != options.invert:
                result.matches.append(LineMatch(line_number=index, line=line))

        result.total_lines = line_count

        logger.debug(
            "search query=%r mode=%s ignore_case=%s invert=%s matched=%d/%d",
            query,
            options.mode.value,
            options.ignore_case,
            options.invert,
            len(result.matches),
            line_count,
        )
        return result


def search(text: str, query: str, options: SearchOptions | None = None) -> SearchResult:
    """Run a one-off search with *options* (defaults to substring matching)."""
    return SearchEngine(options or SearchOptions()).run(text, query)
