from __future__ import annotations

from typing import Any, Callable

from ..core.constants import DEFAULT_INVALID_CONFIDENCE, DEFAULT_VALID_CONFIDENCE
from ..validation.model import ValidationResult

ConfidencePolicy = Callable[[Any, ValidationResult], Any]


def default_confidence_policy(confidence: Any, result: ValidationResult) -> Any:
    """Keep the producer's confidence; backfill 0.8 (valid) / 0.6 (invalid) when it is missing or zero."""
    if confidence:
        return confidence
    return DEFAULT_VALID_CONFIDENCE if result.valid else DEFAULT_INVALID_CONFIDENCE
