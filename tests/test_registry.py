from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor

import pytest

from fieldcheck.configuration import Configuration
from fieldcheck.constraints import (
    Constraint,
    ConstraintRegistry,
    ConstraintViolation,
    constraint_registry_scope,
    get_current_registry,
)
from fieldcheck.constraints.registry import FirstViolationSignal
from fieldcheck.validatables import Validatable

if sys.version_info < (3, 11):
    from exceptiongroup import ExceptionGroup

FAIL_FAST = Configuration(fail_on_first_violation=True)


def _unsatisfied(segment: str | None = None, message: str = "") -> Constraint:
    return Constraint(False, Validatable(None, segment)).explain(message)


def test_scope_makes_registry_ambient_and_resets_it() -> None:
    assert get_current_registry() is None

    with constraint_registry_scope(Configuration()) as registry:
        assert get_current_registry() is registry

    assert get_current_registry() is None


def test_nested_scopes_restore_outer_registry() -> None:
    with constraint_registry_scope(Configuration()) as outer:
        with constraint_registry_scope(Configuration()) as inner:
            assert get_current_registry() is inner
        assert get_current_registry() is outer


def test_register_ignores_satisfied_and_already_known_constraints() -> None:
    registry = ConstraintRegistry(Configuration())
    constraint = _unsatisfied()

    registry.register(Constraint(True, Validatable(None)))
    registry.register(constraint)
    registry.register(constraint)

    assert registry.constraints() == (constraint,)
    assert len(registry) == 1


def test_register_preserves_insertion_order() -> None:
    registry = ConstraintRegistry(Configuration())
    constraints = [_unsatisfied(str(i)) for i in range(5)]

    for constraint in constraints:
        registry.register(constraint)

    assert registry.constraints() == tuple(constraints)


def test_check_first_violation_is_noop_without_fail_fast() -> None:
    registry = ConstraintRegistry(Configuration())
    registry.register(_unsatisfied())

    registry.check_first_violation()

    assert not registry.short_circuited


def test_check_first_violation_is_noop_on_empty_registry() -> None:
    registry = ConstraintRegistry(FAIL_FAST)

    registry.check_first_violation()

    assert not registry.short_circuited


def test_scope_absorbs_its_own_fail_fast_signal() -> None:
    reached = False

    with constraint_registry_scope(FAIL_FAST) as registry:
        registry.register(_unsatisfied())
        registry.check_first_violation()
        reached = True

    assert not reached
    assert registry.short_circuited
    assert get_current_registry() is None


def test_scope_propagates_signals_of_other_registries() -> None:
    with constraint_registry_scope(FAIL_FAST) as outer:
        outer.register(_unsatisfied())
        with constraint_registry_scope(Configuration()) as inner:
            outer.check_first_violation()

    assert outer.short_circuited
    assert not inner.short_circuited
    assert get_current_registry() is None


def test_scope_propagates_other_exceptions() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with constraint_registry_scope(Configuration()):
            raise RuntimeError("boom")

    assert get_current_registry() is None


def test_to_violation_set_applies_configuration() -> None:
    configuration = Configuration(default_violation_message="Default", root_path=("root",))
    registry = ConstraintRegistry(configuration)
    registry.register(_unsatisfied("a"))
    registry.register(_unsatisfied("b", "Explicit"))

    assert list(registry.to_violation_set()) == [
        ConstraintViolation("Default", ["root", "a"]),
        ConstraintViolation("Explicit", ["root", "b"]),
    ]


def test_to_violation_set_keeps_first_violation_after_fail_fast() -> None:
    with constraint_registry_scope(FAIL_FAST) as registry:
        registry.register(_unsatisfied(message="first"))
        registry.register(_unsatisfied(message="second"))
        registry.check_first_violation()

    assert registry.to_violation_set() == {ConstraintViolation("first")}


def test_register_is_safe_under_concurrent_use() -> None:
    registry = ConstraintRegistry(Configuration())
    constraints = [_unsatisfied(str(i)) for i in range(500)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(registry.register, constraints))
        list(pool.map(registry.register, constraints))

    assert len(registry) == 500
    assert set(registry.constraints()) == set(constraints)


def test_scope_absorbs_group_holding_only_its_own_signals() -> None:
    with constraint_registry_scope(FAIL_FAST) as registry:
        raise ExceptionGroup(
            "tasks", [FirstViolationSignal(registry), FirstViolationSignal(registry)]
        )

    assert get_current_registry() is None


def test_scope_reraises_the_rest_of_a_mixed_group() -> None:
    with pytest.raises(ExceptionGroup) as exc_info:
        with constraint_registry_scope(FAIL_FAST) as registry:
            raise ExceptionGroup("tasks", [FirstViolationSignal(registry), ValueError("boom")])

    assert [type(exc) for exc in exc_info.value.exceptions] == [ValueError]
    assert get_current_registry() is None


def test_scope_leaves_groups_of_foreign_signals_alone() -> None:
    foreign = ConstraintRegistry(FAIL_FAST)

    with pytest.raises(ExceptionGroup) as exc_info:
        with constraint_registry_scope(FAIL_FAST):
            raise ExceptionGroup("tasks", [FirstViolationSignal(foreign)])

    assert exc_info.value.exceptions[0].registry is foreign
