"""
Single line of a text with its term statistics.

A line is the unit of ranking: its word tokens are counted
case-insensitively so term frequency can be computed per query term.
"""

from collections import Counter
from fractions import Fraction
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .tokenizer import Span, split_words, term_key


class Line:
    """
    One line of the source text.

    Attributes:
        span: Full line span (newline excluded)
        tokens: Word tokens in order of appearance
        term_counts: Lowercase term -> occurrences in this line
    """

    __slots__ = ("span", "tokens", "term_counts")

    def __init__(self, span: Span):
        self.span = span
        self.tokens: Tuple[Span, ...] = tuple(
            split_words(span.source, span.start, span.end)
        )
        counts = Counter(term_key(t.text) for t in self.tokens)
        self.term_counts: Mapping[str, int] = MappingProxyType(dict(counts))

    @property
    def text(self) -> str:
        return self.span.text

    def term_frequency(self, term: str) -> Fraction:
        """
        Raw term frequency: occurrences / total tokens in the line.

        Lookup is case-insensitive. Repeated tokens count towards the
        denominator, so "cat cat dog" gives tf("cat") = 2/3.

        Returns:
            Exact ratio, Fraction(0) when the term does not occur
        """
        count = self.term_counts.get(term_key(term), 0)
        if count == 0:
            return Fraction(0)
        return Fraction(count, len(self.tokens))

    def unique_terms(self) -> FrozenSet[str]:
        return frozenset(self.term_counts)

    def is_empty(self) -> bool:
        return not self.tokens

    def __repr__(self) -> str:
        return f"Line({self.text!r})"
