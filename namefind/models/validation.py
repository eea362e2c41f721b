"""
ValidationResult — outcome of checking a feature export.

An export goes through two stages, in order:
    1. "schema": jsonschema conformance against FEATURE_EXPORT_SCHEMA
    2. "model":  SampleFeatures (one event per token, names inside the sentence)
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ValidationResult:
    """Feature export check; stage names the stage that failed, if any."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stage: Optional[str] = None         # "schema" | "model" | None when valid
    data: Optional[dict] = None
