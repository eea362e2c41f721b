"""
Name Finder Events — labeled training examples for the external classifier.

Each token of a NameSample becomes one event: the gold outcome
(start / cont / other) paired with the token's context features.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from jsonschema import ValidationError, validate
from pydantic import ValidationError as ModelValidationError

from namefind.config.constants import CONTINUE_OUTCOME, OTHER_OUTCOME, START_OUTCOME
from namefind.config.schemas import FEATURE_EXPORT_SCHEMA
from namefind.features.context_generator import NameContextGenerator, default_context_generator
from namefind.models.feature_io import SampleFeatures
from namefind.models.name_sample import NameSample
from namefind.models.validation import ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """One (outcome, context) training example."""

    outcome: str
    context: List[str]


def outcomes_for_sample(sample: NameSample) -> List[str]:
    """Gold outcome per token: first token of a name is 'start', the rest 'cont'."""
    outcomes = [OTHER_OUTCOME] * len(sample.tokens)
    for span in sample.names:
        outcomes[span.start] = START_OUTCOME
        for i in range(span.start + 1, span.end):
            outcomes[i] = CONTINUE_OUTCOME
    return outcomes


def generate_events(
    sample: NameSample,
    context_generator: Optional[NameContextGenerator] = None,
) -> List[Event]:
    """Events for every token of the sample, in token order."""
    if context_generator is None:
        context_generator = default_context_generator

    outcomes = outcomes_for_sample(sample)
    events: List[Event] = []
    for index in range(len(sample.tokens)):
        context = context_generator.get_context(sample.tokens, index, outcomes[:index])
        events.append(Event(outcome=outcomes[index], context=context))
    return events


class NameFinderEventStream:
    """Flattens a stream of NameSamples into a stream of Events."""

    def __init__(
        self,
        samples: Iterable[NameSample],
        context_generator: Optional[NameContextGenerator] = None,
    ):
        self.samples = samples
        self.context_generator = context_generator

    def __iter__(self) -> Iterator[Event]:
        for sample in self.samples:
            if sample.clear_adaptive_data:
                logger.debug("Document boundary, no events")
                continue
            yield from generate_events(sample, self.context_generator)


def build_feature_export(
    sample: NameSample,
    context_generator: Optional[NameContextGenerator] = None,
) -> dict:
    """Serializable export of one sample: tokens, names and per-token events."""
    events = generate_events(sample, context_generator)
    return {
        "tokens": list(sample.tokens),
        "names": [s.to_dict() for s in sample.names],
        "events": [
            {
                "index": i,
                "token": token,
                "outcome": event.outcome,
                "features": list(event.context),
            }
            for i, (token, event) in enumerate(zip(sample.tokens, events))
        ],
    }


def validate_feature_export(export: dict) -> ValidationResult:
    """
    Check an export dict against the JSON schema and the typed model.

    Returns:
        ValidationResult; data holds the export when valid.
    """
    errors: List[str] = []
    warnings: List[str] = []

    try:
        validate(instance=export, schema=FEATURE_EXPORT_SCHEMA["schema"])
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings, stage="schema")

    try:
        SampleFeatures.model_validate(export)
    except ModelValidationError as e:
        for err in e.errors():
            errors.append(f"Model violation: {err['msg']}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings, stage="model")

    if not export["names"] and export["tokens"]:
        warnings.append("Sample has no names")

    return ValidationResult(valid=True, errors=errors, warnings=warnings, data=export)
