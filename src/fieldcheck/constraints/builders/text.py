"""String predicates. ``None`` always satisfies them."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..constraint import constrain_if_not_null

if TYPE_CHECKING:
    from ...validatables.validatable import Validatable
    from ..constraint import Constraint


def is_blank(validatable: Validatable[str | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: not value.strip()).otherwise(
        "Must be blank"
    )


def is_not_blank(validatable: Validatable[str | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: bool(value.strip())).otherwise(
        "Must not be blank"
    )


def has_length_equal_to(validatable: Validatable[str | None], length: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) == length).otherwise(
        lambda: f"Length must be equal to {length}"
    )


def has_length_not_equal_to(validatable: Validatable[str | None], length: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) != length).otherwise(
        lambda: f"Length must be different from {length}"
    )


def has_length_lower_than(validatable: Validatable[str | None], length: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) < length).otherwise(
        lambda: f"Length must be lower than {length}"
    )


def has_length_lower_than_or_equal_to(
    validatable: Validatable[str | None], length: int
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) <= length).otherwise(
        lambda: f"Length must be lower than or equal to {length}"
    )


def has_length_greater_than(validatable: Validatable[str | None], length: int) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) > length).otherwise(
        lambda: f"Length must be greater than {length}"
    )


def has_length_greater_than_or_equal_to(
    validatable: Validatable[str | None], length: int
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: len(value) >= length).otherwise(
        lambda: f"Length must be greater than or equal to {length}"
    )


def has_length_between(
    validatable: Validatable[str | None], minimum: int, maximum: int
) -> Constraint:
    """Check ``minimum <= len(value) <= maximum``."""
    return constrain_if_not_null(
        validatable, lambda value: minimum <= len(value) <= maximum
    ).otherwise(lambda: f"Length must be between {minimum} and {maximum}")


def is_matching(
    validatable: Validatable[str | None], pattern: str | re.Pattern[str]
) -> Constraint:
    """Check the whole string matches *pattern*."""
    regex = re.compile(pattern)
    return constrain_if_not_null(
        validatable, lambda value: regex.fullmatch(value) is not None
    ).otherwise(lambda: f"Must match the following pattern: {regex.pattern}")


def is_not_matching(
    validatable: Validatable[str | None], pattern: str | re.Pattern[str]
) -> Constraint:
    regex = re.compile(pattern)
    return constrain_if_not_null(
        validatable, lambda value: regex.fullmatch(value) is None
    ).otherwise(lambda: f"Must not match the following pattern: {regex.pattern}")


def is_starting_with(validatable: Validatable[str | None], prefix: str) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value.startswith(prefix)).otherwise(
        lambda: f'Must start with "{prefix}"'
    )


def is_not_starting_with(validatable: Validatable[str | None], prefix: str) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: not value.startswith(prefix)
    ).otherwise(lambda: f'Must not start with "{prefix}"')


def is_ending_with(validatable: Validatable[str | None], suffix: str) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value.endswith(suffix)).otherwise(
        lambda: f'Must end with "{suffix}"'
    )


def is_not_ending_with(validatable: Validatable[str | None], suffix: str) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: not value.endswith(suffix)
    ).otherwise(lambda: f'Must not end with "{suffix}"')
