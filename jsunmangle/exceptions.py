"""Custom exception hierarchy for the unmangler."""

from __future__ import annotations

from typing import Optional


class UnmangleError(Exception):
    """Base class for all unmangling related errors."""


class LabelError(UnmangleError):
    """Raised when the label structure of a tree is invalid."""

    def __init__(self, message: str, label: Optional[str] = None) -> None:
        super().__init__(message)
        self.label = label


class DuplicateLabelError(LabelError):
    """Raised when a label is declared while one of the same name is open."""


class UnresolvedLabelError(LabelError):
    """Raised when ``break``/``continue`` targets a label that is not open."""


class NameSpaceExhaustedError(UnmangleError):
    """Raised when no dictionary word can satisfy the exclusion rules."""

    def __init__(self, message: str, attempts: int = 0) -> None:
        super().__init__(message)
        self.attempts = attempts


__all__ = [
    "UnmangleError",
    "LabelError",
    "DuplicateLabelError",
    "UnresolvedLabelError",
    "NameSpaceExhaustedError",
]
