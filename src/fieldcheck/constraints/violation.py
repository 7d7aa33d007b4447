"""ConstraintViolation and ConstraintViolationSet: the durable failure records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence, Set
from functools import cached_property
from typing import Any

from pydantic import Field

from ..primitives.value_object import ValueObject

ROOT_ERROR_KEY = "__root__"


class ConstraintViolation(ValueObject):
    """A ``(message, path)`` pair describing one unsatisfied constraint.

    ``metadata`` carries caller-defined string pairs (error codes, severity...)
    and takes part in equality.
    """

    message: str
    path: tuple[str, ...] = ()
    metadata: dict[str, str] = Field(default_factory=dict)

    def __init__(
        self,
        message: str,
        path: Sequence[str] = (),
        metadata: Mapping[str, str] | None = None,
        **data: Any,
    ) -> None:
        super().__init__(
            message=message, path=tuple(path), metadata=dict(metadata or {}), **data
        )

    def with_path_prefix(self, prefix: Sequence[str]) -> ConstraintViolation:
        """Return a copy whose path starts with *prefix*."""
        return self.replace(path=(*prefix, *self.path))

    def __repr__(self) -> str:
        extra = f", metadata={self.metadata!r}" if self.metadata else ""
        return (
            f"ConstraintViolation(message={self.message!r}, path={list(self.path)!r}{extra})"
        )


class ConstraintViolationSet(Set[ConstraintViolation]):
    """Immutable, duplicate-free set of violations.

    Iteration follows registration order. :attr:`by_path` groups the
    violations by path, preserving that order inside each group.
    """

    def __init__(self, violations: Iterable[ConstraintViolation] = ()) -> None:
        self._violations: tuple[ConstraintViolation, ...] = tuple(
            dict.fromkeys(violations)
        )

    def __contains__(self, item: object) -> bool:
        return item in self._violations

    def __iter__(self) -> Iterator[ConstraintViolation]:
        return iter(self._violations)

    def __len__(self) -> int:
        return len(self._violations)

    def __hash__(self) -> int:
        return hash(frozenset(self._violations))

    def __repr__(self) -> str:
        return f"ConstraintViolationSet({list(self._violations)!r})"

    @cached_property
    def by_path(self) -> dict[tuple[str, ...], ConstraintViolationSet]:
        """Violations grouped by path, in order of first appearance."""
        groups: dict[tuple[str, ...], list[ConstraintViolation]] = {}
        for violation in self._violations:
            groups.setdefault(violation.path, []).append(violation)
        return {path: ConstraintViolationSet(group) for path, group in groups.items()}

    def to_dict(self) -> dict[str, list[str]]:
        """Messages keyed by dotted path, ``__root__`` for the empty path."""
        errors: dict[str, list[str]] = {}
        for violation in self._violations:
            key = ".".join(violation.path) if violation.path else ROOT_ERROR_KEY
            errors.setdefault(key, []).append(violation.message)
        return errors
