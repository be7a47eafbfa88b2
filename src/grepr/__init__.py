"""grepr: search a file for lines matching a query string."""

from grepr.matcher import MatchMode, SearchOptions, matches
from grepr.searcher import LineMatch, SearchEngine, SearchResult, search

__version__ = "0.1.0"

__all__ = [
    "LineMatch",
    "MatchMode",
    "SearchEngine",
    "SearchOptions",
    "SearchResult",
    "__version__",
    "matches",
    "search",
]
