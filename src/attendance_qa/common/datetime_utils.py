from __future__ import annotations

import re

_MONTHS = (
    "January|February|March|April|May|June|July|August|September|October|November|December"
    "|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sept|Sep|Oct|Nov|Dec"
)

ISO_DATE_RE = re.compile(r"\b\d{4}-\d{2}-\d{2}\b")
MONTH_DAY_RE = re.compile(rf"\b(?:{_MONTHS})\.?\s\d{{1,2}}(?:st|nd|rd|th)?(?:,\s?\d{{4}})?\b")


def mentions_date(text: str) -> bool:
    """True if text contains an ISO date (2025-10-01) or a month-day date (October 1st, 2025)."""
    if not text:
        return False
    return bool(ISO_DATE_RE.search(text) or MONTH_DAY_RE.search(text))
