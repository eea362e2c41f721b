"""
Typed Pydantic models for the feature export handed to an external trainer.

One SampleFeatures per NameSample; one TokenFeatures event per token.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from namefind.config.constants import DEFAULT_NAME_TYPE, OUTCOMES_ENUM


class NameSpan(BaseModel):
    """Serialized Span."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=1)
    label: str = DEFAULT_NAME_TYPE

    @model_validator(mode="after")
    def check_order(self) -> "NameSpan":
        if self.start >= self.end:
            raise ValueError("start must be strictly less than end")
        return self


class TokenFeatures(BaseModel):
    """A single training event: token, gold outcome and its context features."""

    index: int = Field(..., ge=0)
    token: str
    outcome: str = Field(..., description="'start' | 'cont' | 'other'")
    features: List[str] = Field(..., min_length=1)

    @field_validator("outcome")
    @classmethod
    def validate_outcome(cls, v: str) -> str:
        if v not in OUTCOMES_ENUM:
            raise ValueError(f"outcome must be one of {OUTCOMES_ENUM}, got '{v}'")
        return v


class SampleFeatures(BaseModel):
    """All events for one sentence."""

    tokens: List[str]
    names: List[NameSpan]
    events: List[TokenFeatures]

    @model_validator(mode="after")
    def check_alignment(self) -> "SampleFeatures":
        if len(self.events) != len(self.tokens):
            raise ValueError(
                f"expected one event per token ({len(self.tokens)}), got {len(self.events)}"
            )
        for name in self.names:
            if name.end > len(self.tokens):
                raise ValueError(f"name [{name.start},{name.end}) exceeds sentence length")
        return self
