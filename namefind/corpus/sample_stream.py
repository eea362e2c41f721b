"""
NameSample stream — converts tagged corpus lines into NameSample objects.

Text is one sentence per line, tokenized, with names identified by <START>
and <END> tags. Blank lines become empty samples flagged with
clear_adaptive_data (document boundary).
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from namefind.config import settings
from namefind.corpus.tagged_parser import MalformedAnnotationError, parse_tagged_line
from namefind.models.name_sample import NameSample

logger = logging.getLogger(__name__)


class NameSampleDataStream:
    """
    Iterator over NameSample objects read from any iterable of lines.

    Malformed lines raise MalformedAnnotationError carrying the 1-based line
    number, unless skip_malformed is set, in which case they are logged and
    skipped.
    """

    def __init__(self, lines: Iterable[str], skip_malformed: Optional[bool] = None):
        self._lines = iter(lines)
        self._line_number = 0
        self.skip_malformed = (
            settings.SKIP_MALFORMED_LINES if skip_malformed is None else skip_malformed
        )
        self.skipped = 0

    def __iter__(self) -> Iterator[NameSample]:
        return self

    def __next__(self) -> NameSample:
        while True:
            line = next(self._lines)
            self._line_number += 1
            try:
                return parse_tagged_line(line)
            except MalformedAnnotationError as e:
                annotated = e.with_line_number(self._line_number)
                if not self.skip_malformed:
                    raise annotated from e
                self.skipped += 1
                logger.warning("Skipping malformed line: %s", annotated)


def read_name_samples(
    path: Union[str, Path],
    encoding: Optional[str] = None,
    skip_malformed: Optional[bool] = None,
) -> Iterator[NameSample]:
    """
    Lazily read NameSamples from a tagged corpus file.

    Args:
        path: Corpus file, one tagged sentence per line.
        encoding: File encoding. Defaults to settings.CORPUS_ENCODING.
        skip_malformed: Skip (and log) malformed lines instead of raising.
            Defaults to settings.SKIP_MALFORMED_LINES.
    """
    if encoding is None:
        encoding = settings.CORPUS_ENCODING

    path = Path(path)
    logger.info("Reading tagged corpus: %s", path)

    with open(path, encoding=encoding) as f:
        stream = NameSampleDataStream(f, skip_malformed=skip_malformed)
        count = 0
        for sample in stream:
            count += 1
            yield sample

    logger.info("Read %d samples from %s (%d skipped)", count, path, stream.skipped)
