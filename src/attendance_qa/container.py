from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .integration.service import AnswerReviewService
from .validation.service import AnswerValidator


@dataclass(frozen=True)
class Container:
    validator: AnswerValidator
    review_service: AnswerReviewService


def build_container(*, settings: Any) -> Container:
    validator = AnswerValidator()
    review_service = AnswerReviewService(
        validator,
        auto_fix=bool(getattr(settings, "VALIDATION_AUTO_FIX", True)),
        throw_on_error=bool(getattr(settings, "VALIDATION_THROW_ON_ERROR", False)),
        log_validation=bool(getattr(settings, "VALIDATION_LOG", True)),
    )
    return Container(validator=validator, review_service=review_service)
