"""Temporal predicates for ``datetime`` and ``date`` values.

``None`` always satisfies them. "Now" comes from *clock* when given,
otherwise from the system clock in the value's own timezone. ``date``
values are compared against the current day.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import TYPE_CHECKING

from ..constraint import constrain_if_not_null

if TYPE_CHECKING:
    from ...validatables.validatable import Validatable
    from ..constraint import Constraint

Temporal = datetime | date
Clock = Callable[[], datetime]


def _now(value: Temporal, clock: Clock | None) -> Temporal:
    current = clock() if clock is not None else datetime.now(
        value.tzinfo if isinstance(value, datetime) else None
    )
    if not isinstance(value, datetime):
        return current.date()
    return current


def is_in_past(
    validatable: Validatable[Temporal | None], *, clock: Clock | None = None
) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: value < _now(value, clock)
    ).otherwise("Must be in the past")


def is_in_past_or_is_present(
    validatable: Validatable[Temporal | None], *, clock: Clock | None = None
) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: value <= _now(value, clock)
    ).otherwise("Must be in the past or present")


def is_in_future(
    validatable: Validatable[Temporal | None], *, clock: Clock | None = None
) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: value > _now(value, clock)
    ).otherwise("Must be in the future")


def is_in_future_or_is_present(
    validatable: Validatable[Temporal | None], *, clock: Clock | None = None
) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: value >= _now(value, clock)
    ).otherwise("Must be in the future or present")


def is_before(validatable: Validatable[Temporal | None], other: Temporal) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value < other).otherwise(
        lambda: f'Must be before "{other}"'
    )


def is_before_or_equal_to(
    validatable: Validatable[Temporal | None], other: Temporal
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value <= other).otherwise(
        lambda: f'Must be before or equal to "{other}"'
    )


def is_after(validatable: Validatable[Temporal | None], other: Temporal) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value > other).otherwise(
        lambda: f'Must be after "{other}"'
    )


def is_after_or_equal_to(
    validatable: Validatable[Temporal | None], other: Temporal
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value >= other).otherwise(
        lambda: f'Must be after or equal to "{other}"'
    )
