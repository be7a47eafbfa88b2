"""Per-line match predicate: match modes, case folding and word tokenization."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Anything outside ASCII letters and digits separates words
_WORD_DELIMITER = re.compile(r"[^A-Za-z0-9]+")


class MatchMode(Enum):
    """How a query is compared against a line."""

    SUBSTRING = "substring"
    WORD = "word"
    LINE = "line"


@dataclass(frozen=True)
class SearchOptions:
    """Matching options for a single search."""

    ignore_case: bool = False
    invert: bool = False
    mode: MatchMode = MatchMode.SUBSTRING

    @classmethod
    def from_flags(
        cls,
        ignore_case: bool = False,
        invert: bool = False,
        word: bool = False,
        line: bool = False,
    ) -> SearchOptions:
        """
        Build options from CLI-style boolean flags.

        Args:
            ignore_case: Compare case-insensitively.
            invert: Report lines that do *not* match.
            word: Match whole words only.
            line: Match whole lines only.

        Returns:
            SearchOptions with the mode implied by the flags (substring when
            neither ``word`` nor ``line`` is set).

        Raises:
            ValueError: If both ``word`` and ``line`` are set.
        """
        if word and line:
            msg = "Word and line matching are mutually exclusive."
            raise ValueError(msg)

        if word:
            mode = MatchMode.WORD
        elif line:
            mode = MatchMode.LINE
        else:
            mode = MatchMode.SUBSTRING

        return cls(ignore_case=ignore_case, invert=invert, mode=mode)


def fold_case(text: str, ignore_case: bool) -> str:
    """Lower-case *text* when *ignore_case* is set, otherwise return it as is."""
    return text.lower() if ignore_case else text


def tokenize_words(line: str) -> list[str]:
    """Split *line* into words on runs of non-alphanumeric ASCII characters.

    Empty tokens produced by leading or trailing delimiters are dropped, so
    ``"  hello, world!"`` yields ``["hello", "world"]``.
    """
    return [tok for tok in _WORD_DELIMITER.split(line) if tok]


def matches(query: str, line: str, options: SearchOptions, *, folded: bool = False) -> bool:
    """
    Decide whether *line* satisfies *query* under *options*, ignoring inversion.

    Args:
        query: The search string.
        line: A single line of text without its trailing newline.
        options: Active search options; ``invert`` is not consulted here.
        folded: Set when *query* has already been passed through
            :func:`fold_case`, so it is not folded again.

    Returns:
        True if the line matches in the active mode.
    """
    if not folded:
        query = fold_case(query, options.ignore_case)
    line = fold_case(line, options.ignore_case)

    if options.mode is MatchMode.LINE:
        return line == query
    if options.mode is MatchMode.WORD:
        return any(tok == query for tok in tokenize_words(line))
    return query in line
