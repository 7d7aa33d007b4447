"""Numeric predicates. ``None`` always satisfies them."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING

from ...primitives.exceptions import PreconditionError
from ..constraint import constrain_if_not_null

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...validatables.validatable import Validatable
    from ..constraint import Constraint

Number = Real | Decimal


def is_not_nan(validatable: Validatable[float | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: not math.isnan(value)).otherwise(
        "Must be a valid number"
    )


def is_finite(validatable: Validatable[float | None]) -> Constraint:
    return constrain_if_not_null(validatable, math.isfinite).otherwise("Must be finite")


def is_infinite(validatable: Validatable[float | None]) -> Constraint:
    return constrain_if_not_null(validatable, math.isinf).otherwise("Must be infinite")


def is_negative(validatable: Validatable[Number | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value < 0).otherwise(
        "Must be negative"
    )


def is_negative_or_zero(validatable: Validatable[Number | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value <= 0).otherwise(
        "Must be negative or equal to zero"
    )


def is_positive(validatable: Validatable[Number | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value > 0).otherwise(
        "Must be positive"
    )


def is_positive_or_zero(validatable: Validatable[Number | None]) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value >= 0).otherwise(
        "Must be positive or equal to zero"
    )


def is_lower_than(validatable: Validatable[Number | None], bound: Number) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value < bound).otherwise(
        lambda: f"Must be lower than {bound}"
    )


def is_lower_than_or_equal_to(
    validatable: Validatable[Number | None], bound: Number
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value <= bound).otherwise(
        lambda: f"Must be lower than or equal to {bound}"
    )


def is_greater_than(validatable: Validatable[Number | None], bound: Number) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value > bound).otherwise(
        lambda: f"Must be greater than {bound}"
    )


def is_greater_than_or_equal_to(
    validatable: Validatable[Number | None], bound: Number
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: value >= bound).otherwise(
        lambda: f"Must be greater than or equal to {bound}"
    )


def is_between(
    validatable: Validatable[Number | None],
    start: Number,
    end: Number,
    *,
    end_inclusive: bool = True,
) -> Constraint:
    """Check ``start <= value <= end`` (``< end`` when *end_inclusive* is false)."""
    if end_inclusive:
        return constrain_if_not_null(
            validatable, lambda value: start <= value <= end
        ).otherwise(lambda: f"Must be between {start} and {end} (inclusive)")
    return constrain_if_not_null(validatable, lambda value: start <= value < end).otherwise(
        lambda: f"Must be between {start} and {end} (exclusive)"
    )


# ── Digit counts ─────────────────────────────────────────────────


def _require_count_greater_than_zero(count: int) -> None:
    if count < 1:
        raise PreconditionError("'count' cannot be lower than 1")


def _digit_parts(value: Number) -> tuple[str, str | None] | None:
    """Split the decimal notation of *value* into integral and fractional digits.

    Floats keep their shortest round-trip notation, so ``100.0`` has one
    fractional digit. Returns ``None`` for NaN and infinities.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    if isinstance(value, int):
        return str(abs(value)), None
    notation = format(Decimal(repr(value)) if isinstance(value, float) else value, "f")
    integral, _, fractional = notation.lstrip("-").partition(".")
    return integral, (fractional if fractional else None)


def _constrain_digit_count(
    validatable: Validatable[Number | None],
    check: Callable[[str, str | None], bool],
) -> Constraint:
    def predicate(value: Number) -> bool:
        parts = _digit_parts(value)
        return parts is not None and check(*parts)

    return constrain_if_not_null(validatable, predicate)


def has_integral_count_equal_to(
    validatable: Validatable[Number | None], count: int
) -> Constraint:
    """Check the number of digits before the decimal point."""
    _require_count_greater_than_zero(count)
    return _constrain_digit_count(
        validatable, lambda integral, _: len(integral) == count
    ).otherwise(lambda: f"Must contain {count} integral digits")


def has_fractional_count_equal_to(
    validatable: Validatable[Number | None], count: int
) -> Constraint:
    """Check the number of digits after the decimal point."""
    _require_count_greater_than_zero(count)
    return _constrain_digit_count(
        validatable,
        lambda _, fractional: fractional is not None and len(fractional) == count,
    ).otherwise(lambda: f"Must contain {count} fractional digits")
