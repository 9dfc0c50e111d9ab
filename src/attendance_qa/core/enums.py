from __future__ import annotations

from enum import Enum


class IssueLevel(str, Enum):
    """Severity of a validation issue. Only ERROR makes a result invalid."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class StructuredShape(str, Enum):
    """Shapes of structuredData the normalizer recognizes, in priority order."""

    ARRAY = "array"
    STUDENTS_ARRAY = "students_array"
    STUDENTS_MAP = "students_map"
    INFERRED = "inferred"
    EMPTY = "empty"
