"""Cross-checks narrative mentions against the structured student records.

Checks run in a fixed order and the issues come out in that order:

1. records present but no mentions parsed (warning)
2. mentions present but no records at all (error)
3. placeholder records (error each)
4. every mention must match a record, by id first and then by name (error)
5. mentioned records need names, an id and, when the text cites dates, absences
6. ``attendanceRate`` must be numeric (error)
7. records the narrative never references (one info issue with the count)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..common.datetime_utils import mentions_date
from ..common.records import field, is_number, json_type_name, record_name_key, text_field
from ..core.enums import IssueLevel
from .model import Mention, PlaceholderHit, ValidationIssue, ValidationSummary


@dataclass(frozen=True)
class CheckOutcome:
    issues: tuple[ValidationIssue, ...]
    summary: ValidationSummary


def _record_path(index: int, attr: str = "") -> str:
    path = f"structuredData.students[{index}]"
    return f"{path}.{attr}" if attr else path


class ConsistencyChecker:
    def check(
        self,
        *,
        text: str,
        mentions: Sequence[Mention],
        records: Sequence,
        placeholders: Sequence[PlaceholderHit],
    ) -> CheckOutcome:
        issues: list[ValidationIssue] = []
        issues.extend(self._check_presence(mentions, records))
        issues.extend(self._check_placeholders(placeholders))
        issues.extend(self._check_mentions_matched(mentions, records))
        issues.extend(self._check_mentioned_records(text, mentions, records))
        issues.extend(self._check_types(records))
        issues.extend(self._check_unreferenced(mentions, records))

        summary = ValidationSummary(
            mentioned_in_nl=len(mentions),
            present_in_structured_data=len(records),
            placeholders_found=len(placeholders),
        )
        return CheckOutcome(issues=tuple(issues), summary=summary)

    @staticmethod
    def _check_presence(mentions: Sequence[Mention], records: Sequence) -> list[ValidationIssue]:
        if not mentions and records:
            return [
                ValidationIssue(
                    level=IssueLevel.WARNING,
                    message=(
                        "No student names were parsed from naturalLanguageAnswer, but structuredData "
                        f"contains {len(records)} student record(s)."
                    ),
                    path="naturalLanguageAnswer",
                    suggestion="Ensure the narrative mentions students by full name and ID if necessary.",
                )
            ]
        if mentions and not records:
            return [
                ValidationIssue(
                    level=IssueLevel.ERROR,
                    message=(
                        f"Natural language mentions {len(mentions)} student(s) but structuredData "
                        "is empty or has no student records."
                    ),
                    path="structuredData",
                    suggestion="Populate structuredData.students with matching records.",
                )
            ]
        return []

    @staticmethod
    def _check_placeholders(placeholders: Sequence[PlaceholderHit]) -> list[ValidationIssue]:
        return [
            ValidationIssue(
                level=IssueLevel.ERROR,
                message=f"Placeholder student found in structuredData at index {p.index}.",
                path=_record_path(p.index),
                suggestion="Replace placeholder with the real student firstName and lastName fields.",
            )
            for p in placeholders
        ]

    @staticmethod
    def _matches(mention: Mention, records: Sequence) -> bool:
        if mention.id:
            wanted = mention.id.lower()
            if any(text_field(r, "studentId").lower() == wanted for r in records):
                return True
        if mention.first_name and mention.last_name:
            return any(record_name_key(r) == mention.name_key for r in records)
        return False

    def _check_mentions_matched(self, mentions: Sequence[Mention], records: Sequence) -> list[ValidationIssue]:
        issues = []
        for m in mentions:
            if self._matches(m, records):
                continue
            issues.append(
                ValidationIssue(
                    level=IssueLevel.ERROR,
                    message=f'Mentioned student "{m.label()}" not found in structuredData.',
                    path="structuredData",
                    suggestion="Add or correct the corresponding student record.",
                )
            )
        return issues

    @staticmethod
    def _check_mentioned_records(text: str, mentions: Sequence[Mention], records: Sequence) -> list[ValidationIssue]:
        mentioned = {m.name_key for m in mentions}
        cites_dates = mentions_date(text)
        issues = []

        for i, record in enumerate(records):
            if record_name_key(record) not in mentioned:
                continue

            first = text_field(record, "firstName")
            last = text_field(record, "lastName")
            if not first or not last:
                issues.append(
                    ValidationIssue(
                        level=IssueLevel.ERROR,
                        message=(
                            f"Student at {_record_path(i)} is missing firstName or lastName "
                            "but is described in the narrative."
                        ),
                        path=_record_path(i),
                        suggestion="Include firstName and lastName fields.",
                    )
                )
            if not text_field(record, "studentId"):
                issues.append(
                    ValidationIssue(
                        level=IssueLevel.WARNING,
                        message=f"Student {first} {last} is missing studentId in structuredData.",
                        path=_record_path(i, "studentId"),
                        suggestion="Include studentId when available.",
                    )
                )
            absences = field(record, "absences")
            if cites_dates and not (isinstance(absences, (list, tuple)) and absences):
                issues.append(
                    ValidationIssue(
                        level=IssueLevel.WARNING,
                        message=f"Narrative mentions dates but {_record_path(i, 'absences')} is empty or missing.",
                        path=_record_path(i, "absences"),
                        suggestion="Include absence dates array.",
                    )
                )
        return issues

    @staticmethod
    def _check_types(records: Sequence) -> list[ValidationIssue]:
        issues = []
        for i, record in enumerate(records):
            rate = field(record, "attendanceRate")
            if rate is None or is_number(rate):
                continue
            issues.append(
                ValidationIssue(
                    level=IssueLevel.ERROR,
                    message=(
                        f"attendanceRate for student at index {i} should be a number (percent), "
                        f"got {json_type_name(rate)}."
                    ),
                    path=_record_path(i, "attendanceRate"),
                    suggestion="Ensure attendanceRate is a numeric percentage (e.g., 82).",
                )
            )
        return issues

    @staticmethod
    def _check_unreferenced(mentions: Sequence[Mention], records: Sequence) -> list[ValidationIssue]:
        if not mentions or not records:
            return []
        mentioned = {m.name_key for m in mentions}
        unreferenced = sum(1 for r in records if record_name_key(r) not in mentioned)
        if not unreferenced:
            return []
        return [
            ValidationIssue(
                level=IssueLevel.INFO,
                message=f"{unreferenced} student(s) exist in structuredData but are not referenced in the narrative.",
            )
        ]
