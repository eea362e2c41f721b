"""
Constants used across the name finder feature pipeline.
Versioned and pinned for determinism: feature strings must stay stable for
models trained against them.
"""
from typing import List

# =============================================================================
# Tagged corpus markers
# =============================================================================
START_TAG: str = "<START>"
END_TAG: str = "<END>"

# =============================================================================
# Context window boundary markers
# =============================================================================
BOS: str = "BOS"                    # begin of sequence
EOS: str = "EOS"                    # end of sequence

DEFAULT_FEATURE: str = "def"
DOCUMENT_BEGIN_FEATURE: str = "df=it"

# =============================================================================
# Pluggable generator prefixes
# =============================================================================
TOKEN_CLASS_PREFIX: str = "wc"
SENTENCE_BEGIN_FEATURE: str = "S=begin"
SENTENCE_END_FEATURE: str = "S=end"

# =============================================================================
# Training outcomes (closed enum)
# =============================================================================
START_OUTCOME: str = "start"
CONTINUE_OUTCOME: str = "cont"
OTHER_OUTCOME: str = "other"

OUTCOMES_ENUM: List[str] = [START_OUTCOME, CONTINUE_OUTCOME, OTHER_OUTCOME]

DEFAULT_NAME_TYPE: str = "default"

# =============================================================================
# Versions
# =============================================================================
FEATURE_SET_VERSION: str = "name-context-2.0.0"
EXPORT_SCHEMA_VERSION: str = "feature-export-v1"
