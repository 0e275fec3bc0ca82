"""
TF-IDF line ranking for a single text.

Ranks the lines of a text by relevance to a free-text query. Each line is
a "document" in the TF-IDF sense; the text is the corpus.

Components:
- tokenizer: Predicate-based splitting into zero-copy spans
- line: Per-line term counts and term frequency
- document: Non-empty lines and document frequencies
- ranker: Query scoring, stable top-k selection
- search: Stateless entry points

No state is kept between calls.
"""

from .tokenizer import Span, split_with_predicate, split_words, split_lines, is_alpha, is_not_newline
from .line import Line
from .document import Document
from .models import RankedLine
from .ranker import query_terms, score_lines, rank, rank_lines
from .search import search, search_with_scores

__version__ = "0.1.0"

__all__ = [
    "Span",
    "split_with_predicate",
    "split_words",
    "split_lines",
    "is_alpha",
    "is_not_newline",
    "Line",
    "Document",
    "RankedLine",
    "query_terms",
    "score_lines",
    "rank",
    "rank_lines",
    "search",
    "search_with_scores",
]
