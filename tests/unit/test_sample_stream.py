"""
Unit tests for NameSampleDataStream and read_name_samples.
"""
import logging

import pytest

from namefind.corpus.sample_stream import NameSampleDataStream, read_name_samples
from namefind.corpus.tagged_parser import MalformedAnnotationError
from namefind.models.span import Span


class TestNameSampleDataStream:

    def test_yields_samples(self, tagged_corpus_lines):
        samples = list(NameSampleDataStream(tagged_corpus_lines))
        assert len(samples) == 4
        assert samples[0].names == (Span(0, 2),)
        assert samples[1].names == (Span(1, 2), Span(5, 7))

    def test_blank_line_is_document_boundary(self, tagged_corpus_lines):
        samples = list(NameSampleDataStream(tagged_corpus_lines))
        assert [s.clear_adaptive_data for s in samples] == [False, False, True, False]

    def test_malformed_raises_with_line_number(self):
        lines = ["<START> A <END> b\n", "\n", "c <END>\n"]
        stream = NameSampleDataStream(lines, skip_malformed=False)
        next(stream)
        next(stream)
        with pytest.raises(MalformedAnnotationError) as exc_info:
            next(stream)
        assert exc_info.value.line_number == 3

    def test_skip_malformed(self, caplog):
        lines = ["a <END>\n", "<START> b <END>\n", "<START> c\n", "d\n"]
        stream = NameSampleDataStream(lines, skip_malformed=True)
        with caplog.at_level(logging.WARNING):
            samples = list(stream)
        assert [s.tokens for s in samples] == [("b",), ("d",)]
        assert stream.skipped == 2
        assert "Skipping malformed line" in caplog.text

    def test_empty_input(self):
        assert list(NameSampleDataStream([])) == []


class TestReadNameSamples:

    def test_reads_file(self, tagged_corpus_file):
        samples = list(read_name_samples(tagged_corpus_file))
        assert len(samples) == 4
        assert samples[0].tokens[:2] == ("Pierre", "Vinken")

    def test_utf8(self, tmp_path):
        path = tmp_path / "utf8.txt"
        path.write_text("<START> Zürich <END> liegt am See\n", encoding="utf-8")
        samples = list(read_name_samples(path, encoding="utf-8"))
        assert samples[0].name_tokens() == [["Zürich"]]

    def test_malformed_file_raises(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("ok line\n<START> never closed\n", encoding="utf-8")
        with pytest.raises(MalformedAnnotationError) as exc_info:
            list(read_name_samples(path, skip_malformed=False))
        assert exc_info.value.line_number == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(read_name_samples(tmp_path / "missing.txt"))
