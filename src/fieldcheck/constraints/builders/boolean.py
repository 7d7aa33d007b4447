"""Boolean predicates. ``None`` is neither true nor false."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constraint import constrain

if TYPE_CHECKING:
    from ...validatables.validatable import Validatable
    from ..constraint import Constraint


def is_true(validatable: Validatable[bool | None]) -> Constraint:
    return constrain(validatable, lambda value: value is True).otherwise("Must be true")


def is_not_true(validatable: Validatable[bool | None]) -> Constraint:
    return constrain(validatable, lambda value: value is not True).otherwise(
        "Must not be true"
    )


def is_false(validatable: Validatable[bool | None]) -> Constraint:
    return constrain(validatable, lambda value: value is False).otherwise(
        "Must be false"
    )


def is_not_false(validatable: Validatable[bool | None]) -> Constraint:
    return constrain(validatable, lambda value: value is not False).otherwise(
        "Must not be false"
    )
