from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.records import text_field
from ..core.constants import PLACEHOLDER_NAMES
from .model import PlaceholderHit


class PlaceholderDetector:
    """Finds records whose name is a sentinel such as "Unknown Student"."""

    def __init__(self, vocabulary: Optional[Iterable[str]] = None):
        self._vocabulary = frozenset(vocabulary if vocabulary is not None else PLACEHOLDER_NAMES)

    def is_placeholder(self, value: str) -> bool:
        return value in self._vocabulary

    def detect(self, records: Sequence) -> list[PlaceholderHit]:
        hits: list[PlaceholderHit] = []
        for i, record in enumerate(records):
            first = text_field(record, "firstName")
            last = text_field(record, "lastName")
            display = f"{first} {last}".strip()
            if not display:
                continue
            if self.is_placeholder(display) or self.is_placeholder(first) or self.is_placeholder(last):
                hits.append(PlaceholderHit(index=i, value=record))
        return hits
