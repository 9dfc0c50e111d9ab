from __future__ import annotations

import re

from ..model import Mention
from .base import MentionMatcher, split_name


class BareNameMatcher(MentionMatcher):
    """Two capitalized words: "John Smith". No id."""

    pattern = re.compile(r"\b([A-Z][a-z]+ [A-Z][a-z]+)(?:\b|,|\.|\()")
    claims_overlaps = False

    def build(self, match: re.Match) -> Mention:
        full = match.group(1).strip()
        first, last = split_name(full)
        return Mention(full_name=full, first_name=first, last_name=last, span=(match.start(), match.end()))
