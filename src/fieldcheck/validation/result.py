"""ValidationResult: the immutable outcome of one validator invocation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar

from ..constraints.violation import ConstraintViolationSet
from ..primitives.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..constraints.violation import ConstraintViolation

T = TypeVar("T")


class ValidationResult(ABC, Generic[T]):
    """Either :class:`Success` or :class:`Failure`.

    Usage::

        result = validate_book(book)
        if not result:
            print(result.errors)
        book = result.or_raise()
    """

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """Whether every constraint was satisfied."""
        ...

    @property
    def errors(self) -> dict[str, list[str]]:
        """Messages keyed by dotted path (empty on success)."""
        return {}

    @abstractmethod
    def or_raise(self) -> T:
        """Return the validated value, or raise :class:`ValidationError`."""
        ...

    def __bool__(self) -> bool:
        return self.is_valid

    # ── Factory methods ──────────────────────────────────────────

    @staticmethod
    def success(value: T) -> Success[T]:
        return Success(value)

    @staticmethod
    def failure(
        violations: Iterable[ConstraintViolation], value: T | None = None
    ) -> Failure[T]:
        if not isinstance(violations, ConstraintViolationSet):
            violations = ConstraintViolationSet(violations)
        return Failure(violations, value)


@dataclass(frozen=True)
class Success(ValidationResult[T]):
    """The value satisfied every constraint."""

    value: T

    @property
    def is_valid(self) -> bool:
        return True

    def or_raise(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(ValidationResult[T]):
    """At least one constraint was unsatisfied."""

    violations: ConstraintViolationSet
    value: T | None = None

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def errors(self) -> dict[str, list[str]]:
        return self.violations.to_dict()

    def or_raise(self) -> NoReturn:
        raise ValidationError(self.violations)
