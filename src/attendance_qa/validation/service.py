from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .autofix import AutoFixEngine
from .checker import ConsistencyChecker
from .extraction import EntityExtractor
from .model import ValidationResult
from .normalizer import normalize_structured_data
from .placeholders import PlaceholderDetector


def answer_text(answer: Any) -> str:
    if not isinstance(answer, Mapping):
        return ""
    value = answer.get("naturalLanguageAnswer")
    if value is None:
        value = answer.get("narrativeText")
    return "" if value is None else str(value)


def answer_structured_data(answer: Any) -> Any:
    if not isinstance(answer, Mapping):
        return {}
    return answer.get("structuredData") or {}


class AnswerValidator:
    """Checks a natural-language answer against the structured data sent with it.

    Pure function of its input: no state is kept between calls and the answer is
    never mutated. Auto-fix, when requested, works on a deep copy.
    """

    def __init__(
        self,
        *,
        extractor: Optional[EntityExtractor] = None,
        detector: Optional[PlaceholderDetector] = None,
        checker: Optional[ConsistencyChecker] = None,
        fixer: Optional[AutoFixEngine] = None,
    ):
        self._extractor = extractor or EntityExtractor()
        self._detector = detector or PlaceholderDetector()
        self._checker = checker or ConsistencyChecker()
        self._fixer = fixer or AutoFixEngine()

    def validate(self, answer: Any, *, auto_fix: bool = False) -> ValidationResult:
        text = answer_text(answer)
        structured_data = answer_structured_data(answer)

        mentions = self._extractor.extract(text)
        records = normalize_structured_data(structured_data)
        placeholders = self._detector.detect(records)
        outcome = self._checker.check(text=text, mentions=mentions, records=records, placeholders=placeholders)

        fixes = self._fixer.apply(structured_data, mentions, records) if auto_fix else None
        return ValidationResult(issues=outcome.issues, summary=outcome.summary, auto_fixes=fixes)
