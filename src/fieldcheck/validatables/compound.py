"""ValidatableCompound: apply the same constraints to several validatables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from .validatable import Validatable

T = TypeVar("T")


class ValidatableCompound(Generic[T]):
    """An ordered group of validatables, distinct by path.

    Usage::

        (first_name & last_name).apply(is_not_blank)
    """

    def __init__(self, validatables: Iterable[Validatable[T]]) -> None:
        distinct: dict[tuple[str, ...], Validatable[T]] = {}
        for validatable in validatables:
            distinct.setdefault(validatable.path, validatable)
        self._validatables = tuple(distinct.values())

    @property
    def validatables(self) -> tuple[Validatable[T], ...]:
        return self._validatables

    def __and__(self, other: Validatable[T] | ValidatableCompound[T]) -> ValidatableCompound[T]:
        if isinstance(other, ValidatableCompound):
            return ValidatableCompound([*self._validatables, *other.validatables])
        return ValidatableCompound([*self._validatables, other])

    def __iter__(self) -> Iterator[Validatable[T]]:
        return iter(self._validatables)

    def __len__(self) -> int:
        return len(self._validatables)

    def apply(self, block: Callable[[Validatable[T]], Any]) -> None:
        """Run *block* against every validatable of the compound."""
        for validatable in self._validatables:
            block(validatable)
