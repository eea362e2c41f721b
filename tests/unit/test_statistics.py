"""
Unit tests for corpus statistics.
"""
import pytest

from namefind.corpus.statistics import describe_corpus
from namefind.corpus.tagged_parser import parse_tagged_line


class TestDescribeCorpus:

    def test_counts(self):
        samples = [
            parse_tagged_line("<START> John Smith <END> works here"),
            parse_tagged_line(""),
            parse_tagged_line("a b"),
        ]
        stats = describe_corpus(samples)
        assert stats["sentences"] == 2
        assert stats["document_boundaries"] == 1
        assert stats["tokens"] == 6
        assert stats["names"] == 1
        assert stats["mean_sentence_length"] == pytest.approx(3.0)
        assert stats["max_sentence_length"] == 4
        assert stats["mean_names_per_sentence"] == pytest.approx(0.5)
        assert stats["mean_name_length"] == pytest.approx(2.0)
        assert stats["shape_distribution"] == {"ic": 2, "lc": 4}

    def test_empty_corpus(self):
        stats = describe_corpus([])
        assert stats["sentences"] == 0
        assert stats["tokens"] == 0
        assert stats["mean_sentence_length"] == 0.0
        assert stats["shape_distribution"] == {}
