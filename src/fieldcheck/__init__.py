"""fieldcheck: composable validation of values and object graphs.

Validators run plain Python routines over a value, collect every unsatisfied
constraint with its path, and return a :class:`ValidationResult`.
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────
from .configuration import (
    DEFAULT_VIOLATION_MESSAGE,
    Configuration,
    ConfigurationBuilder,
)

# ── Constraints ─────────────────────────────────────────────────
from .constraints import (
    Constraint,
    ConstraintRegistry,
    ConstraintViolation,
    ConstraintViolationSet,
    constrain,
    constrain_async,
    constrain_if_not_null,
    constrain_if_not_null_async,
    constraint_registry_scope,
    get_current_registry,
)
from .path import Path, PathBuilder

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    FieldcheckError,
    PreconditionError,
    ValidationError,
    ValidatorTypeError,
    ValueObject,
)

# ── Validatables ────────────────────────────────────────────────
from .validatables import Validatable, ValidatableCompound, validatable_of

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    AsyncContextualValidator,
    AsyncValidator,
    ContextualValidator,
    Failure,
    Success,
    ValidationResult,
    Validator,
)

__all__ = [
    "DEFAULT_VIOLATION_MESSAGE",
    "AsyncContextualValidator",
    "AsyncValidator",
    "Configuration",
    "ConfigurationBuilder",
    "Constraint",
    "ConstraintRegistry",
    "ConstraintViolation",
    "ConstraintViolationSet",
    "ContextualValidator",
    "Failure",
    "FieldcheckError",
    "Path",
    "PathBuilder",
    "PreconditionError",
    "Success",
    "Validatable",
    "ValidatableCompound",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "ValidatorTypeError",
    "ValueObject",
    "constrain",
    "constrain_async",
    "constrain_if_not_null",
    "constrain_if_not_null_async",
    "constraint_registry_scope",
    "get_current_registry",
    "validatable_of",
]
