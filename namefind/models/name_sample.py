"""
NameSample — one tokenized sentence with its annotated name spans.

Produced by the tagged corpus parser, consumed read-only by event
generation. Invariants are checked at construction so that downstream code
never sees a span pointing outside the sentence.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from namefind.config.constants import END_TAG, START_TAG
from namefind.models.span import Span


class InvalidSampleError(ValueError):
    """Raised when spans do not fit the token sequence or overlap."""


@dataclass(frozen=True)
class NameSample:
    """Immutable training sample: tokens plus non-overlapping name spans."""

    tokens: Tuple[str, ...]
    names: Tuple[Span, ...] = ()
    additional_context: Optional[Tuple[Tuple[str, ...], ...]] = None
    clear_adaptive_data: bool = False

    def __post_init__(self) -> None:
        # Accept lists from callers, store tuples.
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(self, "names", tuple(self.names))
        if self.additional_context is not None:
            object.__setattr__(
                self,
                "additional_context",
                tuple(tuple(row) for row in self.additional_context),
            )

        n_tokens = len(self.tokens)
        for index, token in enumerate(self.tokens):
            if token in (START_TAG, END_TAG):
                raise InvalidSampleError(f"token {index} is a reserved marker: {token!r}")
            if not token or any(c in token for c in " \r\n"):
                raise InvalidSampleError(f"token {index} is empty or contains a separator: {token!r}")

        if self.additional_context is not None and len(self.additional_context) != n_tokens:
            raise InvalidSampleError(
                f"additional context has {len(self.additional_context)} rows for {n_tokens} tokens"
            )

        for span in self.names:
            if span.end > n_tokens:
                raise InvalidSampleError(
                    f"{span!r} exceeds sentence length {n_tokens}"
                )

        ordered = sorted(self.names, key=lambda s: s.start)
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.overlaps(cur):
                raise InvalidSampleError(f"overlapping names: {prev!r} and {cur!r}")

    def __len__(self) -> int:
        return len(self.tokens)

    def name_tokens(self) -> List[List[str]]:
        """Surface tokens of every name, in span order."""
        return [list(self.tokens[s.start:s.end]) for s in self.names]

    def to_annotated(self) -> str:
        """
        Re-render the sample as a marker-annotated line.

        <START> goes before the first token of a span and <END> after its
        last token, so a well-formed input line survives a parse/render
        round trip unchanged.
        """
        starts = {s.start for s in self.names}
        ends: dict = {}
        for span in self.names:
            ends[span.end] = ends.get(span.end, 0) + 1

        parts: List[str] = []
        for index, token in enumerate(self.tokens):
            parts.extend([END_TAG] * ends.get(index, 0))
            if index in starts:
                parts.append(START_TAG)
            parts.append(token)
        parts.extend([END_TAG] * ends.get(len(self.tokens), 0))
        return " ".join(parts)

    def to_dict(self) -> dict:
        return {
            "tokens": list(self.tokens),
            "names": [s.to_dict() for s in self.names],
            "clear_adaptive_data": self.clear_adaptive_data,
        }

    def __str__(self) -> str:
        return self.to_annotated()
