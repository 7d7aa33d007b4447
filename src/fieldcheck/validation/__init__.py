"""Validation system: Validator variants and ValidationResult."""

from __future__ import annotations

from .result import Failure, Success, ValidationResult
from .validator import (
    AsyncContextualValidator,
    AsyncValidator,
    ContextualValidator,
    Validator,
)

__all__ = [
    "AsyncContextualValidator",
    "AsyncValidator",
    "ContextualValidator",
    "Failure",
    "Success",
    "ValidationResult",
    "Validator",
]
