"""Size predicates for collections and mappings. ``None`` always satisfies them."""

from __future__ import annotations

from collections.abc import Sized
from typing import TYPE_CHECKING

from ..constraint import constrain_if_not_null

if TYPE_CHECKING:
    from ...validatables.validatable import Validatable
    from ..constraint import Constraint


def is_empty(validatable: Validatable[Sized | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) == 0).otherwise(
        "Must be empty"
    )


def is_not_empty(validatable: Validatable[Sized | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) > 0).otherwise(
        "Must not be empty"
    )


def has_size_equal_to(validatable: Validatable[Sized | None], size: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) == size).otherwise(
        lambda: f"The number of items must be equal to {size}"
    )


def has_size_not_equal_to(validatable: Validatable[Sized | None], size: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) != size).otherwise(
        lambda: f"The number of items must be different from {size}"
    )


def has_size_lower_than(validatable: Validatable[Sized | None], size: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) < size).otherwise(
        lambda: f"The number of items must be lower than {size}"
    )


def has_size_lower_than_or_equal_to(
    validatable: Validatable[Sized | None], size: int
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) <= size).otherwise(
        lambda: f"The number of items must be lower than or equal to {size}"
    )


def has_size_greater_than(validatable: Validatable[Sized | None], size: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) > size).otherwise(
        lambda: f"The number of items must be greater than {size}"
    )


def has_size_greater_than_or_equal_to(
    validatable: Validatable[Sized | None], size: int
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) >= size).otherwise(
        lambda: f"The number of items must be greater than or equal to {size}"
    )


def has_size_between(
    validatable: Validatable[Sized | None], minimum: int, maximum: int
) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: minimum <= len(value) <= maximum
    ).otherwise(lambda: f"The number of items must be between {minimum} and {maximum}")
