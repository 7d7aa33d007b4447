from __future__ import annotations

import pytest

from fieldcheck.constraints import ConstraintViolation, ConstraintViolationSet
from fieldcheck.primitives.exceptions import FieldcheckError, ValidationError
from fieldcheck.validation import Failure, Success, ValidationResult


def test_success() -> None:
    result = ValidationResult.success("value")

    assert isinstance(result, Success)
    assert result.is_valid
    assert bool(result) is True
    assert result.errors == {}
    assert result.or_raise() == "value"


def test_failure_factory_wraps_iterables() -> None:
    result = ValidationResult.failure([ConstraintViolation("Bad", ["a"])], "value")

    assert isinstance(result, Failure)
    assert isinstance(result.violations, ConstraintViolationSet)
    assert not result.is_valid
    assert bool(result) is False
    assert result.value == "value"
    assert result.errors == {"a": ["Bad"]}


def test_failure_equality_includes_value() -> None:
    violations = ConstraintViolationSet([ConstraintViolation("Bad")])

    assert Failure(violations, 1) == Failure(violations, 1)
    assert Failure(violations, 1) != Failure(violations, 2)
    assert Failure(violations) == Failure(violations, None)


def test_failure_or_raise_carries_full_violation_set() -> None:
    violations = ConstraintViolationSet(
        [ConstraintViolation("Bad", ["a"]), ConstraintViolation("Worse", ["b"])]
    )

    with pytest.raises(ValidationError) as exc_info:
        Failure(violations, None).or_raise()

    error = exc_info.value
    assert isinstance(error, FieldcheckError)
    assert error.violations is violations
    assert error.to_dict() == {
        "error": "VALIDATION_ERROR",
        "message": "The value is invalid.",
        "errors": {"a": ["Bad"], "b": ["Worse"]},
    }


def test_results_are_immutable() -> None:
    result = Success(1)

    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


def test_validation_result_is_abstract() -> None:
    with pytest.raises(TypeError):
        ValidationResult()  # type: ignore[abstract]
