"""Primitives: exceptions, value objects."""

from __future__ import annotations

from .exceptions import (
    FieldcheckError,
    PreconditionError,
    ValidationError,
    ValidatorTypeError,
)
from .value_object import ValueObject

__all__ = [
    "FieldcheckError",
    "PreconditionError",
    "ValidationError",
    "ValidatorTypeError",
    "ValueObject",
]
