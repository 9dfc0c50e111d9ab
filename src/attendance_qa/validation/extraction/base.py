from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterator, Sequence

from ..model import Mention

Span = tuple[int, int]


def overlaps(span: Span, taken: Sequence[Span]) -> bool:
    """Inclusive test: spans that merely touch count as overlapping."""
    start, end = span
    return any(not (end < s or start > e) for s, e in taken)


def split_name(full_name: str) -> tuple[str, str]:
    parts = full_name.split(" ")
    return parts[0], " ".join(parts[1:])


class MentionMatcher(ABC):
    """Strategy Pattern: one tier of name recognition over the narrative."""

    pattern: re.Pattern

    # When False, matches colliding with spans claimed by earlier tiers are dropped
    claims_overlaps: bool = True

    @abstractmethod
    def build(self, match: re.Match) -> Mention:
        raise NotImplementedError

    def find(self, text: str, taken: Sequence[Span]) -> Iterator[Mention]:
        for m in self.pattern.finditer(text):
            span = (m.start(), m.end())
            if not self.claims_overlaps and overlaps(span, taken):
                continue
            yield self.build(m)
