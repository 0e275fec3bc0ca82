"""
Stateless search entry points.

Each call builds its own Document, ranks, and drops it. Nothing is cached
between calls, so concurrent calls need no coordination.
"""

from typing import List

from .document import Document
from .models import RankedLine
from .ranker import rank, rank_lines


def _check_inputs(text: str, query: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    if not isinstance(query, str):
        raise TypeError(f"query must be str, got {type(query).__name__}")


def search(text: str, query: str, results_count: int) -> List[str]:
    """
    Rank the lines of text by TF-IDF relevance to query.

    Args:
        text: Full text, lines separated by "\\n"
        query: Free-text query
        results_count: Maximum number of lines to return

    Returns:
        At most results_count lines, each an exact substring of text,
        most relevant first. Lines scoring 0 are never returned.

    Raises:
        TypeError: text or query is not a str
        ValueError: results_count is negative

    Examples:
        >>> search("cat dog\\ncat cat\\ndog dog dog", "cat", 2)
        ['cat cat', 'cat dog']

        >>> search("cat dog", "cat", 0)
        []
    """
    _check_inputs(text, query)
    return rank(Document(text), query, results_count)


def search_with_scores(text: str, query: str, results_count: int) -> List[RankedLine]:
    """
    Same selection as search(), with scores and source offsets.

    Returns:
        RankedLine list; text[r.start:r.end] == r.text for every result
    """
    _check_inputs(text, query)
    return rank_lines(Document(text), query, results_count)
