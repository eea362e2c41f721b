"""
Feature extraction run over a tagged name corpus.

Reads:
  - NAMEFIND_CORPUS_FILE (or argv[1]): one sentence per line, names marked
    with <START> / <END>

Produces:
  - NAMEFIND_OUTPUT_FILE (or argv[2]): per-sample tokens, names and
    per-token (outcome, features) events for an external maxent trainer
"""
import json
import logging
import sys
from pathlib import Path

from namefind.config import settings

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_feature_extraction")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
CORPUS_FILE = Path(sys.argv[1] if len(sys.argv) > 1 else settings.NAMEFIND_CORPUS_FILE)
OUTPUT_FILE = Path(sys.argv[2] if len(sys.argv) > 2 else settings.NAMEFIND_OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Load samples
# ---------------------------------------------------------------------------
from namefind.corpus.sample_stream import read_name_samples

logger.info("Loading corpus...")
samples = list(read_name_samples(CORPUS_FILE))
logger.info("samples           : %d", len(samples))

# ---------------------------------------------------------------------------
# Context generator: window features + token class + sentence markers
# ---------------------------------------------------------------------------
from namefind.features.context_generator import NameContextGenerator
from namefind.features.generators import (
    AggregatedFeatureGenerator,
    SentenceFeatureGenerator,
    TokenClassFeatureGenerator,
)

context_generator = NameContextGenerator(
    extra_generators=[
        AggregatedFeatureGenerator([TokenClassFeatureGenerator(), SentenceFeatureGenerator()]),
    ],
)

# ---------------------------------------------------------------------------
# Feature export
# ---------------------------------------------------------------------------
from namefind.config.constants import FEATURE_SET_VERSION
from namefind.features.events import build_feature_export, validate_feature_export

exports = []
invalid = 0
for sample in samples:
    if sample.clear_adaptive_data:
        continue
    export = build_feature_export(sample, context_generator)
    result = validate_feature_export(export)
    if not result.valid:
        invalid += 1
        logger.warning("Invalid export for '%s': %s", sample, result.errors)
        continue
    exports.append(result.data)

logger.info("exported samples  : %d", len(exports))
logger.info("invalid samples   : %d", invalid)

# ---------------------------------------------------------------------------
# Corpus statistics
# ---------------------------------------------------------------------------
from namefind.corpus.statistics import describe_corpus

stats = describe_corpus(samples)

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
OUTPUT_FILE.parent.mkdir(parents=True, exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(
        {
            "feature_set_version": FEATURE_SET_VERSION,
            "statistics": stats,
            "samples": exports,
        },
        f,
        ensure_ascii=False,
        indent=2,
    )

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Print summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("FEATURE EXTRACTION — SUMMARY")
print("=" * 70)
print(f"corpus      : {CORPUS_FILE}")
print(f"features    : {FEATURE_SET_VERSION}")
print(f"\nSentences   : {stats['sentences']} (documents: {stats['document_boundaries']})")
print(f"Tokens      : {stats['tokens']} (mean/sentence={stats['mean_sentence_length']:.2f})")
print(f"Names       : {stats['names']} (mean/sentence={stats['mean_names_per_sentence']:.2f})")

print("\nShapes:")
for shape, count in stats["shape_distribution"].items():
    print(f"  [{shape:6s}] {count}")

print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
