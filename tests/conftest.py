"""
Shared test fixtures for the name finder feature test suite.
"""
import pytest

from namefind.features.word_shape import WordShapeClassifier


# ==========================================================================
# Tagged lines
# ==========================================================================

@pytest.fixture
def tagged_line():
    return "<START> John Smith <END> works here"


@pytest.fixture
def tagged_line_two_names():
    return "a b <START> c <END> d <START> e <END>"


@pytest.fixture
def tagged_corpus_lines():
    return [
        "<START> Pierre Vinken <END> , 61 years old , will join the board .\n",
        "Mr. <START> Vinken <END> is chairman of <START> Elsevier N.V. <END> .\n",
        "\n",
        "Rudolph Agnew , 55 years old , was named a director in 1989 .\n",
    ]


@pytest.fixture
def tagged_corpus_file(tmp_path, tagged_corpus_lines):
    path = tmp_path / "train.txt"
    path.write_text("".join(tagged_corpus_lines), encoding="utf-8")
    return path


# ==========================================================================
# Token sequences
# ==========================================================================

@pytest.fixture
def apple_tokens():
    return ["Apple", "Inc", "was", "founded"]


# ==========================================================================
# Classifiers
# ==========================================================================

@pytest.fixture
def uncached_classifier():
    return WordShapeClassifier(cache_size=0)
