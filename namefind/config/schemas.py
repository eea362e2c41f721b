"""
JSON Schema for the per-sample feature export.

The export is what run_feature_extraction.py writes for an external
maximum-entropy trainer: one entry per sample, one event per token.
"""
from namefind.config.constants import EXPORT_SCHEMA_VERSION, OUTCOMES_ENUM

FEATURE_EXPORT_SCHEMA: dict = {
    "name": EXPORT_SCHEMA_VERSION,
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["tokens", "names", "events"],
        "properties": {
            "tokens": {
                "type": "array",
                "items": {"type": "string"},
            },
            "names": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["start", "end", "label"],
                    "properties": {
                        "start": {"type": "integer", "minimum": 0},
                        "end": {"type": "integer", "minimum": 1},
                        "label": {"type": "string"},
                    },
                },
            },
            "events": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["index", "token", "outcome", "features"],
                    "properties": {
                        "index": {"type": "integer", "minimum": 0},
                        "token": {"type": "string"},
                        "outcome": {"type": "string", "enum": OUTCOMES_ENUM},
                        "features": {
                            "type": "array",
                            "minItems": 1,
                            "items": {"type": "string"},
                        },
                    },
                },
            },
        },
    },
}
