"""
Corpus statistics — quick summary of a tagged corpus before training.
"""
from collections import Counter
from typing import Iterable, Optional

import numpy as np

from namefind.features.word_shape import WordShapeClassifier, word_shape_classifier
from namefind.models.name_sample import NameSample


def describe_corpus(
    samples: Iterable[NameSample],
    classifier: Optional[WordShapeClassifier] = None,
) -> dict:
    """
    Summarize sentence lengths, name density and shape distribution.

    Document-boundary samples (blank lines) are counted separately and
    excluded from the sentence aggregates.
    """
    if classifier is None:
        classifier = word_shape_classifier

    lengths = []
    name_counts = []
    name_lengths = []
    shapes: Counter = Counter()
    documents = 0

    for sample in samples:
        if sample.clear_adaptive_data:
            documents += 1
            continue
        lengths.append(len(sample.tokens))
        name_counts.append(len(sample.names))
        name_lengths.extend(span.length() for span in sample.names)
        shapes.update(classifier.classify(token).value for token in sample.tokens)

    lengths_arr = np.asarray(lengths, dtype=float)
    names_arr = np.asarray(name_counts, dtype=float)
    name_len_arr = np.asarray(name_lengths, dtype=float)

    return {
        "sentences": len(lengths),
        "document_boundaries": documents,
        "tokens": int(lengths_arr.sum()),
        "names": int(names_arr.sum()),
        "mean_sentence_length": float(np.mean(lengths_arr)) if lengths else 0.0,
        "max_sentence_length": int(np.max(lengths_arr)) if lengths else 0,
        "mean_names_per_sentence": float(np.mean(names_arr)) if name_counts else 0.0,
        "mean_name_length": float(np.mean(name_len_arr)) if name_lengths else 0.0,
        "shape_distribution": dict(sorted(shapes.items())),
    }
