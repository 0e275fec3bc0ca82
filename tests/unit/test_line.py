"""
Unit tests for Line term statistics.
"""

from fractions import Fraction

import pytest
from linerank.line import Line
from linerank.tokenizer import Span


def make_line(text: str) -> Line:
    return Line(Span(text, 0, len(text)))


class TestLine:
    """Test per-line counting and term frequency"""

    def test_tokens_and_counts(self):
        """Test counts are case-insensitive, tokens keep case"""
        line = make_line("Cat cat DOG")
        assert [t.text for t in line.tokens] == ["Cat", "cat", "DOG"]
        assert dict(line.term_counts) == {"cat": 2, "dog": 1}

    def test_term_frequency_exact(self):
        """Test tf = count / total tokens (repeats counted)"""
        line = make_line("cat cat dog")
        assert line.term_frequency("cat") == Fraction(2, 3)
        assert line.term_frequency("dog") == Fraction(1, 3)

    def test_term_frequency_case_insensitive(self):
        line = make_line("data Data")
        assert line.term_frequency("DATA") == 1
        assert line.term_frequency("dAtA") == 1

    def test_term_frequency_absent_is_zero(self):
        line = make_line("cat dog")
        assert line.term_frequency("bird") == 0

    def test_unique_terms(self):
        line = make_line("To be, or not to BE")
        assert line.unique_terms() == frozenset({"to", "be", "or", "not"})

    @pytest.mark.parametrize("text", ["", "   ", "1234 5678", "--- *** ---"])
    def test_empty(self, text):
        """Test lines without ASCII letters are empty"""
        line = make_line(text)
        assert line.is_empty()
        assert line.unique_terms() == frozenset()
        assert line.term_frequency("anything") == 0

    def test_not_empty(self):
        assert not make_line("x").is_empty()

    def test_text_is_original_span(self):
        """Test text keeps whitespace and case"""
        source = "first\n  Mixed Case  \nlast"
        line = Line(Span(source, 6, 20))
        assert line.text == "  Mixed Case  "
        assert [(t.start, t.end) for t in line.tokens] == [(8, 13), (14, 18)]

    def test_counts_read_only(self):
        line = make_line("cat")
        with pytest.raises(TypeError):
            line.term_counts["cat"] = 5
