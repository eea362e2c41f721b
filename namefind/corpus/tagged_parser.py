"""
Tagged Corpus Parser — one annotated line to one NameSample.

Input format: space-separated tokens, one sentence per line, with name
mentions delimited by literal <START> / <END> tokens:

    <START> John Smith <END> works here

Markers do not count as tokens. Mentions are flat (no nesting) and must be
closed on the same line; anything else raises MalformedAnnotationError
instead of producing a span with an invalid start.
"""
from typing import List, Optional, Tuple

from namefind.config.constants import END_TAG, START_TAG
from namefind.models.name_sample import NameSample
from namefind.models.span import Span


class MalformedAnnotationError(ValueError):
    """A tagged line whose <START>/<END> markers do not pair up."""

    def __init__(self, message: str, line: str, position: int, line_number: Optional[int] = None):
        self.message = message
        self.line = line
        self.position = position
        self.line_number = line_number
        where = f"line {line_number}, " if line_number is not None else ""
        super().__init__(f"{message} ({where}token {position}): {line!r}")

    def with_line_number(self, line_number: int) -> "MalformedAnnotationError":
        """Copy of this error annotated with the corpus line number."""
        return MalformedAnnotationError(self.message, self.line, self.position, line_number)

    def __reduce__(self):
        return (
            MalformedAnnotationError,
            (self.message, self.line, self.position, self.line_number),
        )


def parse(line: str) -> Tuple[List[str], List[Span]]:
    """
    Split a tagged line into plain tokens and name spans.

    Args:
        line: One corpus line; a trailing newline is ignored and runs of
              spaces do not create empty tokens.

    Returns:
        (tokens, spans) with spans in order of appearance.

    Raises:
        MalformedAnnotationError: on <END> without a pending <START>, on a
            nested <START>, on an empty mention, or on an unclosed <START>
            at end of line.
    """
    parts = [p for p in line.rstrip("\r\n").split(" ") if p]

    tokens: List[str] = []
    spans: List[Span] = []
    pending_start: Optional[int] = None
    pending_position = -1

    for position, part in enumerate(parts):
        if part == START_TAG:
            if pending_start is not None:
                raise MalformedAnnotationError(
                    f"nested {START_TAG}: previous mention opened at token {pending_position} is still open",
                    line, position,
                )
            pending_start = len(tokens)
            pending_position = position
        elif part == END_TAG:
            if pending_start is None:
                raise MalformedAnnotationError(
                    f"{END_TAG} without matching {START_TAG}", line, position,
                )
            if pending_start == len(tokens):
                raise MalformedAnnotationError("empty name mention", line, position)
            spans.append(Span(pending_start, len(tokens)))
            pending_start = None
        else:
            tokens.append(part)

    if pending_start is not None:
        raise MalformedAnnotationError(
            f"unclosed {START_TAG} at end of line", line, pending_position,
        )

    return tokens, spans


def parse_tagged_line(line: str) -> NameSample:
    """
    Parse a tagged line into a NameSample.

    A blank line yields an empty sample with clear_adaptive_data set: blank
    lines separate documents in the corpus.
    """
    tokens, spans = parse(line)
    return NameSample(
        tokens=tuple(tokens),
        names=tuple(spans),
        clear_adaptive_data=len(tokens) == 0,
    )
