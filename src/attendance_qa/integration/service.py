from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from ..core.exceptions import AnswerRejectedError
from ..validation.model import ValidationResult
from ..validation.service import AnswerValidator, answer_text
from .confidence import ConfidencePolicy, default_confidence_policy

logger = logging.getLogger(__name__)


class AnswerReviewService:
    """Validate-and-merge: runs the validator and folds its outcome back into the answer.

    Fails open. A defect inside validation never blocks the answer: the original is
    returned with ``_validation.applied = False`` unless ``throw_on_error`` is set.
    """

    def __init__(
        self,
        validator: AnswerValidator,
        *,
        auto_fix: bool = True,
        throw_on_error: bool = False,
        log_validation: bool = True,
        confidence_policy: Optional[ConfidencePolicy] = None,
    ):
        self._validator = validator
        self._auto_fix = auto_fix
        self._throw_on_error = throw_on_error
        self._log_validation = log_validation
        self._confidence_policy = confidence_policy or default_confidence_policy

    def review(self, answer: Any) -> Any:
        # Nothing to cross-check without both halves
        if not isinstance(answer, Mapping) or not answer_text(answer):
            return answer
        if answer.get("structuredData") in (None, ""):
            return answer

        try:
            result = self._validator.validate(answer, auto_fix=self._auto_fix)
            if self._log_validation:
                self._log(result)
            if not result.valid and self._throw_on_error:
                raise AnswerRejectedError(
                    f"Answer validation failed with {len(result.issues)} issues", result=result
                )
            return self._merge(answer, result)
        except AnswerRejectedError:
            raise
        except Exception as e:
            logger.exception("Error validating answer")
            if self._throw_on_error:
                raise
            return {**answer, "_validation": {"applied": False, "error": str(e) or type(e).__name__}}

    def _merge(self, answer: Mapping, result: ValidationResult) -> dict:
        merged = dict(answer)
        confidence = self._confidence_policy(answer.get("confidence"), result)
        if confidence != answer.get("confidence"):
            logger.info("Backfilled missing confidence: %s", confidence)
        merged["confidence"] = confidence

        fixes = result.auto_fixes
        fix_count = 0
        if fixes and fixes.applied:
            merged["structuredData"] = fixes.fixed_structured_data
            fix_count = len(fixes.details)
            if self._log_validation:
                logger.info("Applied %d fixes", fix_count)

        merged["_validation"] = {
            "applied": True,
            "valid": result.valid,
            "issues": len(result.issues),
            "fixes": fix_count,
        }
        return merged

    @staticmethod
    def _log(result: ValidationResult) -> None:
        logger.info("Output validation: %s", "PASSED" if result.valid else "FAILED")
        if result.issues:
            logger.info("Found %d issues:", len(result.issues))
        for issue in result.issues:
            logger.info("- %s: %s", issue.level.value.upper(), issue.message)
