"""
Pluggable feature generators.

Each generator appends feature strings for tokens[index] to a caller-owned
list. They can be combined with AggregatedFeatureGenerator and passed to
NameContextGenerator as extra generators.
"""
from typing import List, Optional, Sequence

from namefind.config.constants import (
    SENTENCE_BEGIN_FEATURE,
    SENTENCE_END_FEATURE,
    TOKEN_CLASS_PREFIX,
)
from namefind.features.word_shape import WordShapeClassifier, word_shape_classifier


class FeatureGenerator:
    """Base class: subclasses implement create_features."""

    def create_features(
        self,
        features: List[str],
        tokens: Sequence[str],
        index: int,
        previous_outcomes: Sequence[str] = (),
    ) -> None:
        raise NotImplementedError


class TokenClassFeatureGenerator(FeatureGenerator):
    """Generates a feature for the shape class of the token."""

    def __init__(self, classifier: Optional[WordShapeClassifier] = None):
        self.classifier = classifier if classifier is not None else word_shape_classifier

    def create_features(self, features, tokens, index, previous_outcomes=()):
        word_class = self.classifier.classify(tokens[index])
        features.append(f"{TOKEN_CLASS_PREFIX}={word_class.value}")


class SentenceFeatureGenerator(FeatureGenerator):
    """Creates sentence begin and end features."""

    def create_features(self, features, tokens, index, previous_outcomes=()):
        if index == 0:
            features.append(SENTENCE_BEGIN_FEATURE)
        if len(tokens) == index + 1:
            features.append(SENTENCE_END_FEATURE)


class AggregatedFeatureGenerator(FeatureGenerator):
    """Runs several generators in order against the same token."""

    def __init__(self, generators: Sequence[FeatureGenerator]):
        self.generators = list(generators)

    def create_features(self, features, tokens, index, previous_outcomes=()):
        for generator in self.generators:
            generator.create_features(features, tokens, index, previous_outcomes)
