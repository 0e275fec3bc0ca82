"""
Document model - ordered non-empty lines plus document frequencies.

The "document" is one text; its lines play the role of the corpus
documents in TF-IDF:

    idf(term) = ln(N / df(term))

Where:
    N = number of lines with at least one word token
    df = number of such lines containing the term (case-insensitive)

Lines without any ASCII letter are dropped before counting, so they never
influence N or df.
"""

import logging
import math
from collections import defaultdict
from types import MappingProxyType
from typing import Mapping, Tuple

from .line import Line
from .tokenizer import split_lines, term_key

logger = logging.getLogger(__name__)


class Document:
    """
    Immutable line collection built once from a text.

    Attributes:
        text: Source text (referenced, not copied)
        lines: Surviving lines in original top-to-bottom order
        doc_freq: Lowercase term -> number of lines containing it
    """

    __slots__ = ("text", "lines", "doc_freq")

    def __init__(self, text: str):
        self.text = text

        lines = []
        doc_freq = defaultdict(int)

        for line_span in split_lines(text):
            line = Line(line_span)
            if line.is_empty():
                continue

            for term in line.unique_terms():
                doc_freq[term] += 1
            lines.append(line)

        self.lines: Tuple[Line, ...] = tuple(lines)
        self.doc_freq: Mapping[str, int] = MappingProxyType(dict(doc_freq))

        logger.debug(f"Built document: {len(self.lines)} lines, {len(self.doc_freq)} unique terms")

    def contains(self, term: str) -> bool:
        """True if any line contains term (case-insensitive)"""
        return term_key(term) in self.doc_freq

    def document_frequency(self, term: str) -> int:
        """Number of lines containing term, 0 when absent"""
        return self.doc_freq.get(term_key(term), 0)

    def idf(self, term: str) -> float:
        """
        Inverse document frequency: ln(lines / df).

        Args:
            term: Query term, must satisfy contains(term)

        Returns:
            IDF value, 0.0 for a term present in every line

        Raises:
            KeyError: term never occurs in the document
        """
        return math.log(len(self.lines) / self.doc_freq[term_key(term)])

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return f"Document(lines={len(self.lines)}, terms={len(self.doc_freq)})"
