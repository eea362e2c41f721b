"""
Unit tests for Span, NameSample and the feature export models.
"""
import pytest
from pydantic import ValidationError

from namefind.corpus.tagged_parser import parse_tagged_line
from namefind.models.feature_io import NameSpan, SampleFeatures, TokenFeatures
from namefind.models.name_sample import InvalidSampleError, NameSample
from namefind.models.span import Span


class TestSpan:
    """Tests for Span construction and helpers."""

    def test_valid(self):
        span = Span(0, 2)
        assert span.length() == 2
        assert span.label == "default"

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            Span(-1, 2)

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            Span(3, 3)

    def test_reversed_rejected(self):
        with pytest.raises(ValueError):
            Span(4, 2)

    def test_overlaps(self):
        assert Span(0, 3).overlaps(Span(2, 4))
        assert Span(0, 5).overlaps(Span(1, 2))

    def test_adjacent_no_overlap(self):
        assert not Span(0, 2).overlaps(Span(2, 4))
        assert not Span(2, 4).overlaps(Span(0, 2))

    def test_contains(self):
        span = Span(1, 3)
        assert not span.contains(0)
        assert span.contains(1)
        assert span.contains(2)
        assert not span.contains(3)

    def test_frozen(self):
        span = Span(0, 1)
        with pytest.raises(AttributeError):
            span.start = 5

    def test_to_dict(self):
        assert Span(1, 2, "person").to_dict() == {"start": 1, "end": 2, "label": "person"}


class TestNameSample:
    """Tests for NameSample invariants and rendering."""

    def test_lists_stored_as_tuples(self):
        sample = NameSample(tokens=["a", "b"], names=[Span(0, 1)])
        assert sample.tokens == ("a", "b")
        assert sample.names == (Span(0, 1),)

    def test_span_beyond_sentence_rejected(self):
        with pytest.raises(InvalidSampleError):
            NameSample(tokens=["a", "b"], names=[Span(1, 3)])

    def test_overlapping_spans_rejected(self):
        with pytest.raises(InvalidSampleError):
            NameSample(tokens=["a", "b", "c"], names=[Span(1, 3), Span(0, 2)])

    def test_span_ending_at_length_ok(self):
        sample = NameSample(tokens=["a", "b"], names=[Span(1, 2)])
        assert len(sample) == 2

    def test_name_tokens(self):
        sample = NameSample(tokens=["John", "Smith", "works"], names=[Span(0, 2)])
        assert sample.name_tokens() == [["John", "Smith"]]

    def test_additional_context(self):
        sample = NameSample(tokens=["a"], additional_context=[["doc=1"]])
        assert sample.additional_context == (("doc=1",),)

    def test_additional_context_row_per_token(self):
        with pytest.raises(InvalidSampleError):
            NameSample(tokens=["a", "b"], additional_context=[["doc=1"]])

    @pytest.mark.parametrize("token", ["<START>", "<END>"])
    def test_marker_token_rejected(self, token):
        with pytest.raises(InvalidSampleError):
            NameSample(tokens=[token, "b"], names=[Span(1, 2)])

    @pytest.mark.parametrize("token", ["", "New York", "a\nb"])
    def test_separator_token_rejected(self, token):
        with pytest.raises(InvalidSampleError):
            NameSample(tokens=[token])

    def test_tab_inside_token_round_trips(self):
        sample = NameSample(tokens=["a\tb", "c"], names=[Span(0, 1)])
        assert parse_tagged_line(sample.to_annotated()) == sample

    def test_str_is_annotated(self):
        sample = NameSample(tokens=["a", "b", "c"], names=[Span(1, 3)])
        assert str(sample) == "a <START> b c <END>"

    def test_empty_sample_renders_empty(self):
        assert NameSample(tokens=()).to_annotated() == ""

    def test_to_dict(self):
        sample = NameSample(tokens=["a"], names=[Span(0, 1)])
        assert sample.to_dict() == {
            "tokens": ["a"],
            "names": [{"start": 0, "end": 1, "label": "default"}],
            "clear_adaptive_data": False,
        }


class TestFeatureExportModels:
    """Tests for the pydantic export models."""

    def test_token_features_valid(self):
        tf = TokenFeatures(index=0, token="John", outcome="start", features=["def"])
        assert tf.outcome == "start"

    def test_unknown_outcome_rejected(self):
        with pytest.raises(ValidationError):
            TokenFeatures(index=0, token="John", outcome="begin", features=["def"])

    def test_empty_features_rejected(self):
        with pytest.raises(ValidationError):
            TokenFeatures(index=0, token="John", outcome="other", features=[])

    def test_name_span_order(self):
        with pytest.raises(ValidationError):
            NameSpan(start=2, end=2)

    def test_sample_alignment(self):
        with pytest.raises(ValidationError):
            SampleFeatures(
                tokens=["a", "b"],
                names=[],
                events=[TokenFeatures(index=0, token="a", outcome="other", features=["def"])],
            )
