from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import IssueLevel


@dataclass(frozen=True)
class Mention:
    """A student reference found in the narrative text."""

    full_name: str
    first_name: str
    last_name: str
    span: tuple[int, int]
    id: Optional[str] = None

    @property
    def name_key(self) -> tuple[str, str]:
        return self.first_name.lower(), self.last_name.lower()

    def label(self) -> str:
        return f"{self.full_name} ({self.id})" if self.id else self.full_name


@dataclass(frozen=True)
class ValidationIssue:
    level: IssueLevel
    message: str
    path: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"level": self.level.value, "message": self.message}
        if self.path is not None:
            out["path"] = self.path
        if self.suggestion is not None:
            out["suggestion"] = self.suggestion
        return out


@dataclass(frozen=True)
class PlaceholderHit:
    index: int
    value: Any


@dataclass(frozen=True)
class ValidationSummary:
    mentioned_in_nl: int
    present_in_structured_data: int
    placeholders_found: int

    def to_dict(self) -> dict:
        return {
            "mentionedInNL": self.mentioned_in_nl,
            "presentInStructuredData": self.present_in_structured_data,
            "placeholdersFound": self.placeholders_found,
        }


@dataclass(frozen=True)
class AutoFixResult:
    applied: bool
    details: tuple[str, ...] = ()
    fixed_structured_data: Any = None

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"applied": self.applied, "details": list(self.details)}
        if self.applied:
            out["fixedStructuredData"] = self.fixed_structured_data
        return out


@dataclass(frozen=True)
class ValidationResult:
    issues: tuple[ValidationIssue, ...]
    summary: ValidationSummary
    auto_fixes: Optional[AutoFixResult] = None
    valid: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "valid", not any(i.level == IssueLevel.ERROR for i in self.issues))

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == IssueLevel.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == IssueLevel.WARNING]

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "issues": [i.to_dict() for i in self.issues],
            "summary": self.summary.to_dict(),
            "autoFixes": self.auto_fixes.to_dict() if self.auto_fixes else None,
        }
