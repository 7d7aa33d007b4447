from __future__ import annotations

from fieldcheck.constraints import ConstraintViolation
from fieldcheck.validatables import Validatable, ValidatableCompound
from fieldcheck.validation import Validator


def test_compound_is_distinct_by_path() -> None:
    root = Validatable({"a": 1, "b": 2})
    a = root["a"]
    same_a = root["a"]
    b = root["b"]

    compound = a & b & same_a

    assert len(compound) == 2
    assert compound.validatables == (a, b)


def test_compound_merges_compounds() -> None:
    root = Validatable({"a": 1, "b": 2, "c": 3})

    compound = (root["a"] & root["b"]) & (root["b"] & root["c"])

    assert [v.path for v in compound] == [("a",), ("b",), ("c",)]


def test_apply_runs_block_for_each_validatable() -> None:
    def routine(form: Validatable[dict[str, str]]) -> None:
        (form["first_name"] & form["last_name"]).apply(
            lambda v: v.constrain(bool).otherwise("Must not be blank")
        )

    result = Validator(routine)({"first_name": "", "last_name": ""})

    assert not result
    assert result.violations == {
        ConstraintViolation("Must not be blank", ["first_name"]),
        ConstraintViolation("Must not be blank", ["last_name"]),
    }


def test_empty_compound() -> None:
    compound: ValidatableCompound[int] = ValidatableCompound([])

    assert len(compound) == 0
    assert list(compound) == []
