"""
ShapeTag — closed enumeration of coarse word shapes.
"""
from enum import Enum


class ShapeTag(str, Enum):
    """Word shape codes; the value is what appears in feature strings."""

    LOWERCASE = "lc"
    TWO_DIGIT = "2d"
    FOUR_DIGIT = "4d"
    ALNUM_MIXED = "an"
    DIGIT_HYPHEN = "dd"
    DIGIT_SLASH = "ds"
    DIGIT_COMMA = "dc"
    DIGIT_PERIOD = "dp"
    NUMERIC = "num"
    SINGLE_CAP = "sc"
    ALL_CAPS = "ac"
    CAP_PERIOD = "cp"
    INITIAL_CAP = "ic"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value
