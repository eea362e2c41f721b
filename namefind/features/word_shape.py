"""
Word Shape Classifier — maps a token to a single coarse shape tag.

Ordered cascade, first match wins:
    lc, 2d, 4d, (digit-bearing: an, dd, ds, dc, dp, num), sc, ac, cp, ic, other

The precedence is part of the feature contract: reordering the rules changes
the tags and therefore invalidates any model trained on them.
"""
import re
from functools import lru_cache
from typing import Callable, List, Optional, Tuple

from namefind.config import settings
from namefind.models.shape import ShapeTag

LOWERCASE = re.compile(r"^[a-z]+$")
TWO_DIGITS = re.compile(r"^[0-9][0-9]$")
FOUR_DIGITS = re.compile(r"^[0-9][0-9][0-9][0-9]$")
CONTAINS_NUMBER = re.compile(r"[0-9]")
CONTAINS_LETTER = re.compile(r"[a-zA-Z]")
CONTAINS_HYPHEN = re.compile(r"-")
CONTAINS_SLASH = re.compile(r"/")
CONTAINS_COMMA = re.compile(r",")
CONTAINS_PERIOD = re.compile(r"\.")
ALL_CAPS = re.compile(r"^[A-Z]+$")
CAP_PERIOD = re.compile(r"^[A-Z]\.$")
INITIAL_CAP = re.compile(r"^[A-Z]")

Rule = Tuple[Callable[[str], bool], ShapeTag]

# Applied only once the token is known to contain a digit.
DIGIT_RULES: List[Rule] = [
    (lambda w: CONTAINS_LETTER.search(w) is not None, ShapeTag.ALNUM_MIXED),
    (lambda w: CONTAINS_HYPHEN.search(w) is not None, ShapeTag.DIGIT_HYPHEN),
    (lambda w: CONTAINS_SLASH.search(w) is not None, ShapeTag.DIGIT_SLASH),
    (lambda w: CONTAINS_COMMA.search(w) is not None, ShapeTag.DIGIT_COMMA),
    (lambda w: CONTAINS_PERIOD.search(w) is not None, ShapeTag.DIGIT_PERIOD),
]

LEADING_RULES: List[Rule] = [
    (lambda w: LOWERCASE.search(w) is not None, ShapeTag.LOWERCASE),
    (lambda w: TWO_DIGITS.search(w) is not None, ShapeTag.TWO_DIGIT),
    (lambda w: FOUR_DIGITS.search(w) is not None, ShapeTag.FOUR_DIGIT),
]

TRAILING_RULES: List[Rule] = [
    (lambda w: ALL_CAPS.search(w) is not None and len(w) == 1, ShapeTag.SINGLE_CAP),
    (lambda w: ALL_CAPS.search(w) is not None, ShapeTag.ALL_CAPS),
    (lambda w: CAP_PERIOD.search(w) is not None, ShapeTag.CAP_PERIOD),
    (lambda w: INITIAL_CAP.search(w) is not None, ShapeTag.INITIAL_CAP),
]


def _first_match(rules: List[Rule], word: str, default: Optional[ShapeTag] = None) -> Optional[ShapeTag]:
    for predicate, tag in rules:
        if predicate(word):
            return tag
    return default


def word_shape(word: str) -> ShapeTag:
    """
    Return the most relevant shape tag for a word.

    Total: every string, including the empty string, maps to exactly one
    tag; ShapeTag.OTHER is the fallback.
    """
    tag = _first_match(LEADING_RULES, word)
    if tag is not None:
        return tag

    if CONTAINS_NUMBER.search(word) is not None:
        return _first_match(DIGIT_RULES, word, ShapeTag.NUMERIC)

    return _first_match(TRAILING_RULES, word, ShapeTag.OTHER)


class WordShapeClassifier:
    """
    Shape classifier with optional per-word memoisation.

    The cache only short-circuits recomputation; results are identical with
    or without it. cache_size=0 disables caching.
    """

    def __init__(self, cache_size: Optional[int] = None):
        if cache_size is None:
            cache_size = settings.SHAPE_CACHE_SIZE
        if cache_size < 0:
            raise ValueError(f"cache_size must be >= 0, got {cache_size}")
        self.cache_size = cache_size
        if cache_size > 0:
            self._classify = lru_cache(maxsize=cache_size)(word_shape)
        else:
            self._classify = word_shape

    def classify(self, word: str) -> ShapeTag:
        return self._classify(word)

    def cache_info(self):
        """lru_cache statistics, or None when caching is disabled."""
        if self.cache_size == 0:
            return None
        return self._classify.cache_info()


# Module-level default classifier
word_shape_classifier = WordShapeClassifier()


def classify_shape(word: str) -> ShapeTag:
    """Classify with the shared module-level classifier."""
    return word_shape_classifier.classify(word)
