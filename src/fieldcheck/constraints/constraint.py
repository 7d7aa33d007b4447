"""Constraint: the outcome of one predicate evaluated against one Validatable."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from ..path import PathBuilder
from ..primitives.exceptions import PreconditionError
from .registry import get_current_registry
from .violation import ConstraintViolation

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping, Sequence

    from ..path import Path
    from ..validatables.validatable import Validatable
    from .registry import ConstraintRegistry

T = TypeVar("T")


class Constraint:
    """A satisfied flag, plus a message and path that only matter when unsatisfied.

    The path is snapshotted from the validatable at creation. The message
    starts empty; :meth:`otherwise`, :meth:`explain` and :meth:`with_path`
    are no-ops on satisfied constraints.
    """

    def __init__(self, satisfied: bool, validatable: Validatable[Any]) -> None:
        self._satisfied = bool(satisfied)
        self._validatable = validatable
        self._path: Path = validatable.path
        self._message = ""
        self._metadata: dict[str, str] = validatable.default_metadata
        self._converted = False

    @property
    def satisfied(self) -> bool:
        return self._satisfied

    @property
    def path(self) -> Path:
        return self._path

    @property
    def message(self) -> str:
        return self._message

    @property
    def metadata(self) -> dict[str, str]:
        return dict(self._metadata)

    @property
    def validatable(self) -> Validatable[Any]:
        return self._validatable

    def __bool__(self) -> bool:
        return self._satisfied

    def explain(self, message: str) -> Constraint:
        """Set *message* if the constraint is unsatisfied."""
        if not self._satisfied:
            self._message = message
        return self

    def otherwise(self, message: Callable[[], str] | str) -> Constraint:
        """Set the message if the constraint is unsatisfied.

        A callable is only invoked for unsatisfied constraints.
        """
        if self._satisfied:
            return self
        return self.explain(message() if callable(message) else message)

    def with_metadata(
        self, metadata: Callable[[], Mapping[str, str]] | Mapping[str, str]
    ) -> Constraint:
        """Replace the metadata if the constraint is unsatisfied.

        Starts from the default metadata of the validator. A callable is only
        invoked for unsatisfied constraints.
        """
        if not self._satisfied:
            self._metadata = dict(metadata() if callable(metadata) else metadata)
        return self

    def with_path(self, transform: Callable[[PathBuilder], Sequence[str]]) -> Constraint:
        """Rewrite the path if the constraint is unsatisfied.

        *transform* receives a :class:`~fieldcheck.path.PathBuilder` bound to
        the constrained validatable::

            constrain(v, check).with_path(lambda p: p.absolute("path", "to", "value"))
        """
        if not self._satisfied:
            self._path = tuple(transform(PathBuilder(self._validatable)))
        return self

    def to_constraint_violation(
        self, default_message: str, root_path: Sequence[str] = ()
    ) -> ConstraintViolation:
        """Convert into a violation, prefixing the path with *root_path*.

        Only valid once, and only for unsatisfied constraints.
        """
        if self._satisfied:
            raise PreconditionError(
                "Converting to `ConstraintViolation` can only be done "
                "when the constraint is not satisfied."
            )
        if self._converted:
            raise PreconditionError("The constraint was already converted.")
        self._converted = True
        return ConstraintViolation(
            self._message or default_message,
            (*root_path, *self._path),
            metadata=self._metadata,
        )

    def __repr__(self) -> str:
        return (
            f"Constraint(satisfied={self._satisfied}, path={list(self._path)!r}, "
            f"message={self._message!r}, metadata={self._metadata!r})"
        )


def _registry_for(validatable: Validatable[Any]) -> ConstraintRegistry | None:
    # Worker threads do not inherit the context; the validatable knows its run.
    registry = get_current_registry()
    return registry if registry is not None else validatable.registry


def _before_evaluation(validatable: Validatable[Any]) -> None:
    registry = _registry_for(validatable)
    if registry is not None:
        registry.check_first_violation()


def _record(validatable: Validatable[Any], constraint: Constraint) -> Constraint:
    if not constraint.satisfied:
        validatable._record_constraint(constraint)
        registry = _registry_for(validatable)
        if registry is not None:
            registry.register(constraint)
    return constraint


def constrain(
    validatable: Validatable[T], predicate: Callable[[T], object]
) -> Constraint:
    """Evaluate *predicate* against the wrapped value and register the outcome.

    Unsatisfied constraints are registered with the ambient registry of the
    running validation, which is what predicate builders rely on::

        def is_even(v: Validatable[int]) -> Constraint:
            return constrain(v, lambda n: n % 2 == 0).otherwise("Must be even")
    """
    _before_evaluation(validatable)
    return _record(validatable, Constraint(bool(predicate(validatable.value)), validatable))


def constrain_if_not_null(
    validatable: Validatable[T | None], predicate: Callable[[T], object]
) -> Constraint:
    """Like :func:`constrain`, but a ``None`` value is always satisfied."""
    value = validatable.value
    if value is None:
        return constrain(validatable, lambda _: True)
    return constrain(validatable, lambda _: predicate(value))


async def constrain_async(
    validatable: Validatable[T],
    predicate: Callable[[T], Awaitable[object] | object],
) -> Constraint:
    """Awaitable :func:`constrain` for predicates relying on external work."""
    _before_evaluation(validatable)
    outcome = predicate(validatable.value)
    if inspect.isawaitable(outcome):
        outcome = await outcome
    return _record(validatable, Constraint(bool(outcome), validatable))


async def constrain_if_not_null_async(
    validatable: Validatable[T | None],
    predicate: Callable[[T], Awaitable[object] | object],
) -> Constraint:
    """Awaitable :func:`constrain_if_not_null`."""
    value = validatable.value
    if value is None:
        return constrain(validatable, lambda _: True)
    return await constrain_async(validatable, lambda _: predicate(value))
