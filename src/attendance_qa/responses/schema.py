"""Shape checks for raw answers coming back from the query layer.

These run before consistency validation: they make sure the answer has the
``naturalLanguageAnswer``/``structuredData``/``suggestedActions``/``confidence`` keys
with usable types, and salvage what they can from malformed text.
"""
from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

from ..common.records import is_number
from ..core.constants import FALLBACK_CONFIDENCE, SANITIZED_CONFIDENCE

logger = logging.getLogger(__name__)

_JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")

NO_ANSWER_TEXT = "No valid response was generated."
FALLBACK_ANSWER_TEXT = "I couldn't generate a proper response. Please try again or rephrase your question."
FALLBACK_ACTIONS = (
    "Try asking a different question",
    "Check if your question is related to attendance data",
    "Be more specific in your query",
)


def _valid_confidence(value: Any) -> bool:
    return is_number(value) and 0 <= value <= 1


def _valid_structured_data(value: Any) -> bool:
    return value is None or isinstance(value, Mapping)


def _usable_structured_data(value: Any) -> bool:
    # arrays are not well-formed, but sanitizing keeps them for the normalizer
    return value is None or isinstance(value, (Mapping, list, tuple))


def is_well_formed_answer(answer: Any) -> bool:
    if not isinstance(answer, Mapping):
        return False
    text = answer.get("naturalLanguageAnswer")
    if not isinstance(text, str) or not text.strip():
        return False
    if not isinstance(answer.get("suggestedActions"), list):
        return False
    if not _valid_confidence(answer.get("confidence")):
        return False
    return _valid_structured_data(answer.get("structuredData"))


def sanitize_answer(answer: Any) -> dict:
    """Coerce anything into an answer dict, keeping whatever parts are usable (array structuredData included)."""
    source = answer if isinstance(answer, Mapping) else {}
    text = source.get("naturalLanguageAnswer")
    structured = source.get("structuredData")
    actions = source.get("suggestedActions")
    confidence = source.get("confidence")
    return {
        "naturalLanguageAnswer": text if isinstance(text, str) else NO_ANSWER_TEXT,
        "structuredData": structured if _usable_structured_data(structured) else None,
        "suggestedActions": [a for a in actions if isinstance(a, str)] if isinstance(actions, list) else [],
        "confidence": confidence if _valid_confidence(confidence) else SANITIZED_CONFIDENCE,
    }


def fallback_answer() -> dict:
    return {
        "naturalLanguageAnswer": FALLBACK_ANSWER_TEXT,
        "structuredData": None,
        "suggestedActions": list(FALLBACK_ACTIONS),
        "confidence": FALLBACK_CONFIDENCE,
    }


def extract_answer_from_text(text: str) -> dict:
    """Parse an answer out of possibly malformed JSON text.

    Tries the whole text, then the outermost ``{...}`` block, then gives up with a
    fixed fallback answer.
    """
    try:
        return sanitize_answer(json.loads(text))
    except (TypeError, ValueError):
        pass

    block = _JSON_BLOCK_RE.search(text or "")
    if block:
        try:
            return sanitize_answer(json.loads(block.group(0)))
        except ValueError:
            logger.error("Failed to extract valid JSON from answer text")
    return fallback_answer()
