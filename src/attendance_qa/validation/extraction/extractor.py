from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..model import Mention
from .bare_name_matcher import BareNameMatcher
from .base import MentionMatcher
from .identified_name_matcher import IdentifiedNameMatcher

logger = logging.getLogger(__name__)


class EntityExtractor:
    """Rule-based student name recognition.

    Matchers run in order; each one sees the spans recorded by the tiers before it,
    so an id-bearing match suppresses the bare-name match for the same words.
    Duplicates are kept: downstream checks reason per mention.
    """

    def __init__(self, matchers: Optional[Sequence[MentionMatcher]] = None):
        self._matchers = list(matchers) if matchers is not None else [IdentifiedNameMatcher(), BareNameMatcher()]

    def extract(self, text: Optional[str]) -> list[Mention]:
        if not text:
            return []

        mentions: list[Mention] = []
        taken: list[tuple[int, int]] = []
        for matcher in self._matchers:
            found = list(matcher.find(text, taken))
            mentions.extend(found)
            taken.extend(m.span for m in found)

        mentions.sort(key=lambda m: m.span[0])
        logger.debug("Extracted %d mention(s) from %d chars", len(mentions), len(text))
        return mentions
