"""
Name Context Generator — contextual features for a tag/chunk style
named-entity recognizer.

Features describe the current token, its shape, and the text and shape of
the tokens in a ±2 window, plus begin/end-of-sequence markers where the
window leaves the sentence. The feature strings are opaque to the
downstream classifier but must stay stable across releases
(see FEATURE_SET_VERSION).
"""
from typing import List, Optional, Sequence

from namefind.config.constants import BOS, DEFAULT_FEATURE, DOCUMENT_BEGIN_FEATURE, EOS
from namefind.features.generators import FeatureGenerator
from namefind.features.word_shape import WordShapeClassifier, word_shape_classifier


class NameContextGenerator:
    """
    Static (outcome-independent) context features for tokens[index].

    Extra generators, if given, append their features after the window
    features; without them the output is exactly the window features.
    """

    def __init__(
        self,
        classifier: Optional[WordShapeClassifier] = None,
        extra_generators: Optional[Sequence[FeatureGenerator]] = None,
    ):
        self.classifier = classifier if classifier is not None else word_shape_classifier
        self.extra_generators = list(extra_generators or [])

    def get_context(
        self,
        tokens: Sequence[str],
        index: int,
        previous_outcomes: Sequence[str] = (),
    ) -> List[str]:
        """
        Return the features for tokens[index].

        Args:
            tokens: The sentence being processed. Not modified.
            index: Position of the token to describe.
            previous_outcomes: Outcomes already decided for tokens[:index];
                only forwarded to extra generators.

        Raises:
            IndexError: if index is outside [0, len(tokens)).
        """
        if index < 0 or index >= len(tokens):
            raise IndexError(
                f"token index {index} out of range for sequence of length {len(tokens)}"
            )

        feats = self._window_features(tokens, index)
        for generator in self.extra_generators:
            generator.create_features(feats, tokens, index, previous_outcomes)
        return feats

    def _shape(self, word: str) -> str:
        return self.classifier.classify(word).value

    def _window_features(self, tokens: Sequence[str], i: int) -> List[str]:
        feats: List[str] = [DEFAULT_FEATURE]
        n = len(tokens)

        # current word
        w = tokens[i].lower()
        wf = self._shape(tokens[i])
        feats.append(f"w={w}")
        feats.append(f"wf={wf}")
        feats.append(f"w&wf={w},{wf}")

        if i == 0:
            feats.append(DOCUMENT_BEGIN_FEATURE)

        # two back
        if i - 2 >= 0:
            ppw = tokens[i - 2].lower()
            ppwf = self._shape(tokens[i - 2])
            feats.append(f"ppw={ppw}")
            feats.append(f"ppwf={ppwf}")
            feats.append(f"ppw&f={ppw},{ppwf}")
        else:
            feats.append(f"ppw={BOS}")

        # previous word
        if i == 0:
            feats.append(f"pw={BOS}")
            feats.append(f"pw={BOS},w={w}")
            feats.append(f"pwf={BOS},wf={wf}")
        else:
            pw = tokens[i - 1].lower()
            pwf = self._shape(tokens[i - 1])
            feats.append(f"pw={pw}")
            feats.append(f"pwf={pwf}")
            feats.append(f"pw&f={pw},{pwf}")
            feats.append(f"pw={pw},w={w}")
            feats.append(f"pwf={pwf},wf={wf}")

        # next word
        if i + 1 >= n:
            feats.append(f"nw={EOS}")
            feats.append(f"w={w},nw={EOS}")
            feats.append(f"wf={wf},nw={EOS}")
        else:
            nw = tokens[i + 1].lower()
            nwf = self._shape(tokens[i + 1])
            feats.append(f"nw={nw}")
            feats.append(f"nwf={nwf}")
            feats.append(f"nw&f={nw},{nwf}")
            feats.append(f"w={w},nw={nw}")
            feats.append(f"wf={wf},nwf={nwf}")

        # two ahead
        if i + 2 >= n:
            feats.append(f"nnw={EOS}")
        else:
            nnw = tokens[i + 2].lower()
            nnwf = self._shape(tokens[i + 2])
            feats.append(f"nnw={nnw}")
            feats.append(f"nnwf={nnwf}")
            feats.append(f"nnw&f={nnw},{nnwf}")

        return feats


# Module-level default generator
default_context_generator = NameContextGenerator()


def extract_context_features(tokens: Sequence[str], index: int) -> List[str]:
    """Window features for tokens[index] using the default generator."""
    return default_context_generator.get_context(tokens, index)
