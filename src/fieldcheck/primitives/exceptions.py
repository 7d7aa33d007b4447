"""Exceptions raised by the fieldcheck toolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..constraints.violation import ConstraintViolationSet


class FieldcheckError(Exception):
    """Root exception for the entire fieldcheck toolkit."""


class ValidationError(FieldcheckError):
    """Raised when a failed validation result is unwrapped with ``or_raise()``.

    Carries the complete violation set plus structured errors:
    ``{dotted.path: [messages]}``.
    """

    def __init__(self, violations: ConstraintViolationSet) -> None:
        self.violations = violations
        self.errors: dict[str, list[str]] = violations.to_dict()
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": "The value is invalid.",
            "errors": self.errors,
        }


class PreconditionError(FieldcheckError, ValueError):
    """Raised when the engine is misused by the calling code.

    Never part of a validation result: converting a satisfied constraint,
    converting the same constraint twice, invalid predicate-builder arguments.
    """


class ValidatorTypeError(FieldcheckError, TypeError):
    """Raised when a validator is composed from an incompatible call site.

    Usage: a suspendable validator can only be composed with
    ``validate_with_async``.
    """
