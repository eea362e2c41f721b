"""
Span — half-open token index range marking a name mention.
"""
from dataclasses import dataclass

from namefind.config.constants import DEFAULT_NAME_TYPE


@dataclass(frozen=True)
class Span:
    """Token range [start, end) over a sentence."""

    start: int
    end: int
    label: str = DEFAULT_NAME_TYPE

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"span start must be >= 0, got {self.start}")
        if self.start >= self.end:
            raise ValueError(
                f"span start must be strictly less than end, got [{self.start},{self.end})"
            )

    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "Span") -> bool:
        """Check if two spans share at least one token."""
        return not (self.end <= other.start or other.end <= self.start)

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "label": self.label,
        }

    def __repr__(self) -> str:
        return f"Span([{self.start},{self.end}), {self.label})"
