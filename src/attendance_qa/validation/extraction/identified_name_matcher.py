from __future__ import annotations

import re

from ..model import Mention
from .base import MentionMatcher, split_name


class IdentifiedNameMatcher(MentionMatcher):
    """Names followed by a parenthesized id: "Rosa Nguyen (S1021)"."""

    pattern = re.compile(r"([A-Z][a-z]+(?:\s[A-Z][a-z]+){0,2})\s*\(\s*([A-Za-z0-9\-_.:]+)\s*\)")

    def build(self, match: re.Match) -> Mention:
        full = match.group(1).strip()
        first, last = split_name(full)
        return Mention(
            full_name=full,
            first_name=first,
            last_name=last,
            id=match.group(2).strip(),
            span=(match.start(), match.end()),
        )
