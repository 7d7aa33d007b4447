"""Predicates applicable to any value: nullity, equality, identity, type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...validatables.validatable import Validatable
from ..constraint import constrain

if TYPE_CHECKING:
    from ..constraint import Constraint


def _unwrap(other: Any) -> Any:
    # Comparisons against another validatable use its wrapped value.
    return other.unwrap() if isinstance(other, Validatable) else other


def is_null(validatable: Validatable[Any]) -> Constraint:
    return constrain(validatable, lambda value: value is None).otherwise("Must be null")


def is_not_null(validatable: Validatable[Any]) -> Constraint:
    return constrain(validatable, lambda value: value is not None).otherwise(
        "Must not be null"
    )


def is_equal_to(validatable: Validatable[Any], other: Any) -> Constraint:
    expected = _unwrap(other)
    return constrain(validatable, lambda value: value == expected).otherwise(
        lambda: f'Must be equal to "{expected}"'
    )


def is_not_equal_to(validatable: Validatable[Any], other: Any) -> Constraint:
    expected = _unwrap(other)
    return constrain(validatable, lambda value: value != expected).otherwise(
        lambda: f'Must be different from "{expected}"'
    )


def is_identical_to(validatable: Validatable[Any], other: Any) -> Constraint:
    return constrain(validatable, lambda value: value is other).otherwise(
        lambda: f'Must be identical to "{other}"'
    )


def is_not_identical_to(validatable: Validatable[Any], other: Any) -> Constraint:
    return constrain(validatable, lambda value: value is not other).otherwise(
        lambda: f'Must not be identical to "{other}"'
    )


def is_instance_of(
    validatable: Validatable[Any], cls: type[Any] | tuple[type[Any], ...]
) -> Constraint:
    return constrain(validatable, lambda value: isinstance(value, cls)).otherwise(
        lambda: f'Must be an instance of "{_type_name(cls)}"'
    )


def is_not_instance_of(
    validatable: Validatable[Any], cls: type[Any] | tuple[type[Any], ...]
) -> Constraint:
    return constrain(validatable, lambda value: not isinstance(value, cls)).otherwise(
        lambda: f'Must not be an instance of "{_type_name(cls)}"'
    )


def _type_name(cls: type[Any] | tuple[type[Any], ...]) -> str:
    if isinstance(cls, tuple):
        return ", ".join(c.__name__ for c in cls)
    return cls.__name__
