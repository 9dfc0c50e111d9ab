"""Reduce the many shapes of ``structuredData`` to one list of student records.

Each recognized shape has its own discriminator; they are tried in priority order and
the first one that accepts the payload wins. An explicit ``students`` key always beats
inference from arbitrary payload values.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..core.constants import STUDENT_IDENTITY_FIELDS
from ..core.enums import StructuredShape


@dataclass(frozen=True)
class ShapeMatch:
    shape: StructuredShape
    records: list


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _as_array(payload: Any) -> Optional[list]:
    if _is_sequence(payload):
        return list(payload)
    return None


def _as_students_array(payload: Any) -> Optional[list]:
    if isinstance(payload, Mapping) and _is_sequence(payload.get("students")):
        return list(payload["students"])
    return None


def _as_students_map(payload: Any) -> Optional[list]:
    if isinstance(payload, Mapping) and isinstance(payload.get("students"), Mapping):
        return list(payload["students"].values())
    return None


def looks_like_student(value: Any) -> bool:
    return isinstance(value, Mapping) and any(value.get(k) for k in STUDENT_IDENTITY_FIELDS)


def _as_inferred(payload: Any) -> Optional[list]:
    if not isinstance(payload, Mapping):
        return None
    found = [v for v in payload.values() if looks_like_student(v)]
    return found or None


DISCRIMINATORS: tuple[tuple[StructuredShape, Callable[[Any], Optional[list]]], ...] = (
    (StructuredShape.ARRAY, _as_array),
    (StructuredShape.STUDENTS_ARRAY, _as_students_array),
    (StructuredShape.STUDENTS_MAP, _as_students_map),
    (StructuredShape.INFERRED, _as_inferred),
)


def classify_structured_data(payload: Any) -> ShapeMatch:
    if not payload:
        return ShapeMatch(StructuredShape.EMPTY, [])
    for shape, discriminate in DISCRIMINATORS:
        records = discriminate(payload)
        if records is not None:
            return ShapeMatch(shape, records)
    return ShapeMatch(StructuredShape.EMPTY, [])


def normalize_structured_data(payload: Any) -> list:
    return classify_structured_data(payload).records
