"""
Tokenizer for line ranking.

Splits a string into maximal runs of characters accepted by a predicate.
Two predicates are used throughout the package:
1. is_alpha: ASCII letters only (word tokens inside a line or query)
2. is_not_newline: everything except "\\n" (line spans inside a text)

Tokens are Span objects (source reference + offsets), the substring is only
materialized when .text is read.

Classification is pinned to ASCII: str.isalpha() is Unicode-aware and
would make results depend on the script of the input.
"""

import string
from dataclasses import dataclass, field
from typing import Callable, List, Optional

ASCII_LETTERS = frozenset(string.ascii_letters)

_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) view into source"""
    source: str = field(repr=False)  # Caller's string, never copied
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text


def is_alpha(ch: str) -> bool:
    return ch in ASCII_LETTERS


def is_not_newline(ch: str) -> bool:
    return ch != "\n"


def split_with_predicate(
    text: str,
    predicate: Callable[[str], bool],
    start: int = 0,
    end: Optional[int] = None
) -> List[Span]:
    """
    Split text into maximal runs of characters satisfying predicate.

    Characters rejected by the predicate are separators and never appear
    in any returned span.

    Args:
        text: Input string (not copied)
        predicate: Character classifier
        start: First index to scan (default: 0)
        end: Index to stop scanning at (default: len(text))
            Spans never extend past end

    Returns:
        Spans in left-to-right order, offsets relative to text

    Examples:
        >>> [s.text for s in split_with_predicate("ab, c1d", is_alpha)]
        ['ab', 'c', 'd']

        >>> split_with_predicate("", is_alpha)
        []
    """
    parts = []

    size = len(text) if end is None else end
    left = start
    while left < size:
        if not predicate(text[left]):
            left += 1
            continue

        right = left + 1
        while right < size and predicate(text[right]):
            right += 1

        parts.append(Span(text, left, right))
        left = right

    return parts


def split_words(text: str, start: int = 0, end: Optional[int] = None) -> List[Span]:
    """Word tokens: maximal runs of ASCII letters"""
    return split_with_predicate(text, is_alpha, start, end)


def split_lines(text: str) -> List[Span]:
    """Line spans: runs of non-newline characters (blank lines yield nothing)"""
    return split_with_predicate(text, is_not_newline)


def term_key(term: str) -> str:
    """
    Case-insensitive lookup key for a term.

    Only ASCII letters are folded, matching the tokenizer's alphabet.

    Examples:
        >>> term_key("DaTa")
        'data'
    """
    return term.translate(_LOWER_TABLE)
