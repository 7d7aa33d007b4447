"""Validatable: a value plus its position in the object graph."""

from __future__ import annotations

import inspect
import logging
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..constraints.constraint import (
    Constraint,
    constrain,
    constrain_async,
    constrain_if_not_null,
    constrain_if_not_null_async,
)
from ..path import extend_path
from ..primitives.exceptions import ValidatorTypeError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterator

    from ..constraints.registry import ConstraintRegistry
    from ..path import Path
    from .compound import ValidatableCompound

logger = logging.getLogger("fieldcheck.validatables")

T = TypeVar("T")
V = TypeVar("V")


def _getter_name(getter: Any) -> str:
    if isinstance(getter, str):
        return getter
    if isinstance(getter, property) and getter.fget is not None:
        return getter.fget.__name__
    name = getattr(getter, "__name__", None)
    if not name:
        raise TypeError(f"Cannot derive a path segment from {getter!r}")
    return str(name)


def _read(value: Any, getter: Any) -> Any:
    if isinstance(getter, str):
        return getattr(value, getter)
    if isinstance(getter, property):
        if getter.fget is None:
            raise TypeError(f"Property {getter!r} has no getter")
        return getter.fget(value)
    return getter(value)


class Validatable(Generic[T]):
    """Wraps a value together with its path segment and parent.

    Roots are created by validators; children are produced by navigation
    (:meth:`validatable_of`, iteration, indexing) and extend the parent's path
    by their own segment. A validatable never changes after construction.

    Roots built by a validator also carry the run's registry and default
    constraint metadata; children inherit both from their parent, so
    constraints evaluated in worker threads still reach the run.

    Usage::

        def validate_book(book: Validatable[Book]) -> None:
            title = book.validatable_of("title")
            title.constrain(lambda t: len(t) > 0).otherwise("Must not be empty")
    """

    def __init__(
        self,
        value: T,
        path_segment: str | None = None,
        parent: Validatable[Any] | None = None,
        *,
        path: Path | None = None,
        registry: ConstraintRegistry | None = None,
        default_metadata: Mapping[str, str] | None = None,
    ) -> None:
        self._value = value
        self._parent = parent
        if parent is not None:
            registry = registry if registry is not None else parent.registry
            if default_metadata is None:
                default_metadata = parent.default_metadata
        self._registry = registry
        self._default_metadata: dict[str, str] = dict(default_metadata or {})
        self._path: Path = tuple(path) if path is not None else extend_path(parent, path_segment)
        self._constraints: list[Constraint] = []

    # ── Accessors ────────────────────────────────────────────────

    @property
    def value(self) -> T:
        return self._value

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self._value

    @property
    def path(self) -> Path:
        return self._path

    @property
    def parent(self) -> Validatable[Any] | None:
        return self._parent

    @property
    def registry(self) -> ConstraintRegistry | None:
        """Registry of the validation run this node belongs to, if any."""
        return self._registry

    @property
    def default_metadata(self) -> dict[str, str]:
        """Metadata given to constraints evaluated against this node."""
        return dict(self._default_metadata)

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        """Unsatisfied constraints produced against this node."""
        return tuple(self._constraints)

    def _record_constraint(self, constraint: Constraint) -> None:
        self._constraints.append(constraint)

    # ── Constraints ──────────────────────────────────────────────

    def constrain(self, predicate: Callable[[T], object]) -> Constraint:
        """Shortcut for :func:`~fieldcheck.constraints.constrain`."""
        return constrain(self, predicate)

    def constrain_if_not_null(self, predicate: Callable[[Any], object]) -> Constraint:
        """Shortcut for :func:`~fieldcheck.constraints.constrain_if_not_null`."""
        return constrain_if_not_null(self, predicate)

    async def constrain_async(
        self, predicate: Callable[[T], Awaitable[object] | object]
    ) -> Constraint:
        """Shortcut for :func:`~fieldcheck.constraints.constrain_async`."""
        return await constrain_async(self, predicate)

    async def constrain_if_not_null_async(
        self, predicate: Callable[[Any], Awaitable[object] | object]
    ) -> Constraint:
        """Shortcut for :func:`~fieldcheck.constraints.constrain_if_not_null_async`."""
        return await constrain_if_not_null_async(self, predicate)

    # ── Navigation ───────────────────────────────────────────────

    def validatable_of(self, getter: str | property | Callable[[T], V]) -> Validatable[Any]:
        """Wrap a field of the value, appending the field's name to the path.

        *getter* is an attribute name, a ``property`` object or a named
        callable. A ``None`` value yields a child wrapping ``None``.
        """
        segment = _getter_name(getter)
        child_value = None if self._value is None else _read(self._value, getter)
        return Validatable(child_value, segment, self)

    def with_value(self, value: V) -> Validatable[V]:
        """Duplicate this validatable with a new value; the path is unchanged."""
        return Validatable(
            value,
            parent=self._parent,
            path=self._path,
            registry=self._registry,
            default_metadata=self._default_metadata,
        )

    def map(self, transform: Callable[[T], V]) -> Validatable[V]:
        """Wrap the result of *transform* applied to the value, at the same path."""
        return self.with_value(transform(self._value))

    def __iter__(self) -> Iterator[Validatable[Any]]:
        if self._value is None:
            return iter(())
        if not isinstance(self._value, Iterable):
            raise TypeError(f"{type(self._value).__name__!r} value is not iterable")
        return (
            Validatable(item, str(index), self)
            for index, item in enumerate(self._value)
        )

    def each(self, block: Callable[[Validatable[Any]], object]) -> None:
        """Run *block* against every item of an iterable value."""
        for item in self:
            block(item)

    def first(self) -> Validatable[Any]:
        """Wrap the first item of an iterable value (``None`` when empty)."""
        return Validatable(next(iter(self._value or ()), None), "first", self)

    def last(self) -> Validatable[Any]:
        """Wrap the last item of an iterable value (``None`` when empty)."""
        tail = deque(self._value or (), maxlen=1)
        return Validatable(tail[0] if tail else None, "last", self)

    def __getitem__(self, key: Any) -> Validatable[Any]:
        """Wrap an item of a mapping or sequence.

        Missing keys and indices outside ``range(len(value))``, negative ones
        included, wrap ``None``.
        """
        value: Any = self._value
        item = None
        if isinstance(value, Mapping):
            item = value.get(key)
        elif isinstance(value, Sequence) and isinstance(key, int):
            if 0 <= key < len(value):
                item = value[key]
        elif value is not None:
            raise TypeError(f"{type(value).__name__!r} value is not indexable")
        return Validatable(item, str(key), self)

    def __and__(
        self, other: Validatable[Any] | ValidatableCompound[Any]
    ) -> ValidatableCompound[Any]:
        from .compound import ValidatableCompound

        return ValidatableCompound([self]) & other

    # ── Composition ──────────────────────────────────────────────

    def validate_with(self, validator: Any, *context: Any) -> None:
        """Run *validator*'s routine against this validatable.

        The routine reports into the registry of the current run, so its
        violations keep paths relative to the outermost validated value.
        Contextual validators take their context as extra argument.
        """
        if getattr(validator, "is_suspendable", False):
            raise ValidatorTypeError(
                f"{type(validator).__name__} is suspendable, use validate_with_async"
            )
        logger.debug("Composing %s at path %s", type(validator).__name__, self._path)
        validator.run_nested(self, *context)

    async def validate_with_async(self, validator: Any, *context: Any) -> None:
        """Awaitable :meth:`validate_with`, accepting any kind of validator."""
        logger.debug("Composing %s at path %s", type(validator).__name__, self._path)
        outcome = validator.run_nested(self, *context)
        if inspect.isawaitable(outcome):
            await outcome

    def __repr__(self) -> str:
        return f"Validatable(value={self._value!r}, path={list(self._path)!r})"


def validatable_of(
    validatable: Validatable[Any], getter: str | property | Callable[[Any], Any]
) -> Validatable[Any]:
    """Functional form of :meth:`Validatable.validatable_of`."""
    return validatable.validatable_of(getter)
