"""
TF-IDF line ranker.

Formula:
    score(line) = Σ tf(term, line) × idf(term)   over distinct query terms

Where:
    tf = occurrences of term in line / tokens in line
    idf = ln(lines / lines containing term)

Query terms are deduplicated by exact spelling while lines are indexed
case-insensitively: "Cat cat" contributes the "cat" weight twice.

Ordering:
    - Descending score, ties keep original line order (stable sort)
    - Scanning stops at the first line scoring exactly 0
"""

import logging
from typing import List

from .document import Document
from .models import RankedLine
from .tokenizer import split_words

logger = logging.getLogger(__name__)


def query_terms(query: str) -> List[str]:
    """
    Tokenize a query into sorted, exactly-deduplicated terms.

    Examples:
        >>> query_terms("dog cat dog Cat")
        ['Cat', 'cat', 'dog']
    """
    return sorted({span.text for span in split_words(query)})


def score_lines(document: Document, query: str) -> List[float]:
    """
    Compute the relevance score of every line.

    Args:
        document: Document to score
        query: Free-text query

    Returns:
        Scores index-aligned with document.lines
    """
    scores = [0.0] * len(document.lines)

    for term in query_terms(query):
        # Unknown terms would divide by zero in idf
        if not document.contains(term):
            continue

        weight = document.idf(term)
        for i, line in enumerate(document.lines):
            scores[i] += line.term_frequency(term) * weight

    return scores


def _check_count(k: int) -> None:
    if k < 0:
        raise ValueError(f"results count must be non-negative, got {k}")


def _top_indices(scores: List[float], k: int) -> List[int]:
    order = sorted(range(len(scores)), key=scores.__getitem__, reverse=True)

    selected = []
    for i in order[:min(k, len(scores))]:
        if scores[i] == 0:
            break
        selected.append(i)
    return selected


def rank_lines(document: Document, query: str, k: int) -> List[RankedLine]:
    """
    Select the k most relevant lines with their scores.

    Args:
        document: Document to search
        query: Free-text query
        k: Maximum number of results (0 returns nothing)

    Returns:
        RankedLine list, sorted by score (descending), zero scores excluded

    Raises:
        ValueError: k is negative
    """
    _check_count(k)

    if not document.lines or k == 0:
        return []

    scores = score_lines(document, query)
    selected = _top_indices(scores, k)

    logger.debug(f"Ranked {len(scores)} lines for query {query!r}: {len(selected)} results (k={k})")

    results = []
    for i in selected:
        span = document.lines[i].span
        results.append(RankedLine(
            text=span.text,
            score=scores[i],
            line_index=i,
            start=span.start,
            end=span.end
        ))
    return results


def rank(document: Document, query: str, k: int) -> List[str]:
    """
    Return the texts of the k most relevant lines.

    Example:
        >>> doc = Document("cat dog\\ncat cat\\ndog dog dog")
        >>> rank(doc, "cat", 2)
        ['cat cat', 'cat dog']
    """
    return [ranked.text for ranked in rank_lines(document, query, k)]
