from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.exceptions import ValidationError


def require_mapping(value: Any, field_name: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field_name} must be a JSON object")
    return value


def parse_flag(value: Any) -> bool:
    """Query-string style boolean: 1/true/yes/on."""
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}
