from __future__ import annotations

import copy
import logging
from collections.abc import MutableMapping
from typing import Any, Sequence

from ..common.records import record_name_key, text_field
from .model import AutoFixResult, Mention

logger = logging.getLogger(__name__)


class AutoFixEngine:
    """Best-effort repair on a deep copy of structuredData.

    Only one repair exists: when the narrative names a student with an id and the
    matching record has no ``studentId``, the id is copied into the record. Only the
    ``{"students": [...]}`` shape is written to; records reached through any other shape
    are left alone and no fix is reported for them.
    """

    def apply(self, structured_data: Any, mentions: Sequence[Mention], records: Sequence) -> AutoFixResult:
        fixed = copy.deepcopy(structured_data)
        target = fixed.get("students") if isinstance(fixed, MutableMapping) else None
        if not isinstance(target, list):
            target = None

        details: list[str] = []
        for m in mentions:
            if not m.id:
                continue
            for i, record in enumerate(records):
                if record_name_key(record) != m.name_key or text_field(record, "studentId"):
                    continue
                if target is None or i >= len(target) or not isinstance(target[i], MutableMapping):
                    continue
                if text_field(target[i], "studentId"):
                    # already filled by an earlier mention in this run
                    continue
                target[i]["studentId"] = m.id
                first, last = record_name_key(record)
                details.append(f"Set studentId for {first} {last} to {m.id}")

        if details:
            logger.debug("Auto-fix applied %d change(s)", len(details))
        return AutoFixResult(
            applied=bool(details),
            details=tuple(details),
            fixed_structured_data=fixed if details else None,
        )
