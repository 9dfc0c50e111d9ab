from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input is invalid (e.g. a non-object JSON body)."""


class AnswerRejectedError(DomainError):
    """Raised in throw-on-error mode when an answer fails validation."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result
