"""Constraints: evaluation, ambient registry, violations."""

from __future__ import annotations

from .constraint import (
    Constraint,
    constrain,
    constrain_async,
    constrain_if_not_null,
    constrain_if_not_null_async,
)
from .registry import (
    ConstraintRegistry,
    constraint_registry_scope,
    get_current_registry,
)
from .violation import ConstraintViolation, ConstraintViolationSet

__all__ = [
    "Constraint",
    "ConstraintRegistry",
    "ConstraintViolation",
    "ConstraintViolationSet",
    "constrain",
    "constrain_async",
    "constrain_if_not_null",
    "constrain_if_not_null_async",
    "constraint_registry_scope",
    "get_current_registry",
]
