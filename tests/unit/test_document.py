"""
Unit tests for Document construction and IDF.
"""

import math

import pytest
from linerank.document import Document


class TestDocument:
    """Test line filtering and document frequencies"""

    def test_lines_in_order(self, pets_text):
        doc = Document(pets_text)
        assert [line.text for line in doc.lines] == ["cat dog", "cat cat", "dog dog dog"]
        assert len(doc) == 3

    def test_document_frequency_counts_lines_not_occurrences(self, pets_text):
        doc = Document(pets_text)
        assert dict(doc.doc_freq) == {"cat": 2, "dog": 2}
        assert doc.document_frequency("dog") == 2  # 4 occurrences, 2 lines

    def test_empty_lines_discarded(self, notes_text):
        """Test blank, numeric and punctuation-only lines never survive"""
        doc = Document(notes_text)
        assert [line.text for line in doc.lines] == [
            "Data pipelines move DATA between systems.",
            "Caching reduces latency.",
            "The data cache is warm.",
        ]

    def test_case_insensitive_vocabulary(self, notes_text):
        doc = Document(notes_text)
        assert doc.contains("data")
        assert doc.contains("DATA")
        assert doc.document_frequency("Data") == 2
        assert not doc.contains("caches")

    def test_empty_lines_do_not_affect_idf(self):
        """Test idf is identical with and without letterless lines"""
        plain = Document("alpha beta\nbeta")
        noisy = Document("\n123\nalpha beta\n...\n\nbeta\n42")
        assert noisy.idf("alpha") == plain.idf("alpha")
        assert noisy.idf("beta") == plain.idf("beta")

    def test_idf(self, pets_text):
        doc = Document(pets_text)
        assert doc.idf("cat") == pytest.approx(math.log(3 / 2))
        assert doc.idf("CAT") == doc.idf("cat")

    def test_idf_zero_when_term_in_every_line(self):
        doc = Document("common rare\ncommon")
        assert doc.idf("common") == 0.0
        assert doc.idf("rare") == pytest.approx(math.log(2))

    def test_idf_absent_term_raises(self, pets_text):
        doc = Document(pets_text)
        assert not doc.contains("bird")
        with pytest.raises(KeyError):
            doc.idf("bird")

    @pytest.mark.parametrize("text", ["", "\n\n", "123\n456", "   "])
    def test_no_lines(self, text):
        doc = Document(text)
        assert doc.lines == ()
        assert len(doc.doc_freq) == 0

    def test_lines_reference_source(self, pets_text):
        doc = Document(pets_text)
        for line in doc.lines:
            assert line.span.source is pets_text
            assert pets_text[line.span.start:line.span.end] == line.text

    def test_read_only_statistics(self, pets_text):
        doc = Document(pets_text)
        with pytest.raises(TypeError):
            doc.doc_freq["cat"] = 10
