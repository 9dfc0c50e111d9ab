"""Helpers for reading loosely typed JSON student records."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def field(record: Any, name: str) -> Any:
    """Read a field from a record; anything that is not a mapping has no fields."""
    if isinstance(record, Mapping):
        return record.get(name)
    return None


def text_field(record: Any, name: str) -> str:
    value = field(record, name)
    if value is None:
        return ""
    return str(value).strip()


def name_key(first: str, last: str) -> tuple[str, str]:
    return (first or "").strip().lower(), (last or "").strip().lower()


def record_name_key(record: Any) -> tuple[str, str]:
    return name_key(text_field(record, "firstName"), text_field(record, "lastName"))


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if value is None:
        return "null"
    return "object"
