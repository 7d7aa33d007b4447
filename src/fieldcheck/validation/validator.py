"""Validators: the entry points running a validation routine over a value.

Each top-level call opens its own constraint registry; composing validators
through :meth:`Validatable.validate_with` runs the inner routine inside the
registry of the outer call instead.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ..configuration import Configuration
from ..constraints.registry import ConstraintRegistry, constraint_registry_scope
from ..validatables.validatable import Validatable
from .result import Failure, Success, ValidationResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

logger = logging.getLogger("fieldcheck.validation")

T = TypeVar("T")
C = TypeVar("C")


def _to_result(registry: ConstraintRegistry, value: T) -> ValidationResult[T]:
    if len(registry) == 0:
        logger.debug("Validation succeeded")
        return Success(value)
    violations = registry.to_violation_set()
    logger.debug("Validation failed with %d violation(s)", len(violations))
    return Failure(violations, value)


class _BaseValidator(Generic[T]):
    """Configuration and default constraint metadata shared by every validator."""

    is_suspendable: ClassVar[bool] = False

    def __init__(
        self,
        configuration: Configuration | None = None,
        default_metadata: Mapping[str, str] | None = None,
    ) -> None:
        self._configuration = configuration or Configuration()
        self._default_metadata: dict[str, str] = dict(default_metadata or {})

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def default_metadata(self) -> dict[str, str]:
        """Metadata given to every constraint of a run, unless overridden."""
        return dict(self._default_metadata)

    def _root(self, value: T, registry: ConstraintRegistry) -> Validatable[T]:
        return Validatable(value, registry=registry, default_metadata=self._default_metadata)


class Validator(_BaseValidator[T]):
    """Runs a routine against a value and reports every unsatisfied constraint.

    Usage::

        def check_book(book: Validatable[Book]) -> None:
            is_not_blank(book.validatable_of("title"))

        validate_book = Validator(check_book)
        result = validate_book(Book(title=""))

    ``Validator`` also works as a decorator for routines using the default
    configuration.
    """

    def __init__(
        self,
        routine: Callable[[Validatable[T]], object],
        configuration: Configuration | None = None,
        *,
        default_metadata: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(configuration, default_metadata)
        self._routine = routine
        functools.update_wrapper(self, routine, updated=())

    def validate(self, value: T) -> ValidationResult[T]:
        """Validate *value* in a fresh, isolated run."""
        logger.debug("Validation run started with %s", type(value).__name__)
        with constraint_registry_scope(self._configuration) as registry:
            self._routine(self._root(value, registry))
        return _to_result(registry, value)

    __call__ = validate

    def run_nested(self, validatable: Validatable[T]) -> None:
        """Run the routine against *validatable* within the current run."""
        self._routine(validatable)

    # ── Factories ────────────────────────────────────────────────

    @staticmethod
    def contextual(
        routine: Callable[[Validatable[T], C], object],
        configuration: Configuration | None = None,
        *,
        default_metadata: Mapping[str, str] | None = None,
    ) -> ContextualValidator[C, T]:
        return ContextualValidator(routine, configuration, default_metadata=default_metadata)

    @staticmethod
    def suspendable(
        routine: Callable[[Validatable[T]], Awaitable[object]],
        configuration: Configuration | None = None,
        *,
        default_metadata: Mapping[str, str] | None = None,
    ) -> AsyncValidator[T]:
        return AsyncValidator(routine, configuration, default_metadata=default_metadata)

    @staticmethod
    def suspendable_contextual(
        routine: Callable[[Validatable[T], C], Awaitable[object]],
        configuration: Configuration | None = None,
        *,
        default_metadata: Mapping[str, str] | None = None,
    ) -> AsyncContextualValidator[C, T]:
        return AsyncContextualValidator(routine, configuration, default_metadata=default_metadata)


class ContextualValidator(_BaseValidator[T], Generic[C, T]):
    """A :class:`Validator` whose routine also receives a context value.

    The context is passed explicitly; nested contextual validators must be
    given it again through ``validate_with(validator, context)``.
    """

    def __init__(
        self,
        routine: Callable[[Validatable[T], C], object],
        configuration: Configuration | None = None,
        *,
        default_metadata: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(configuration, default_metadata)
        self._routine = routine
        functools.update_wrapper(self, routine, updated=())

    def validate(self, context: C, value: T) -> ValidationResult[T]:
        logger.debug("Contextual validation run started with %s", type(value).__name__)
        with constraint_registry_scope(self._configuration) as registry:
            self._routine(self._root(value, registry), context)
        return _to_result(registry, value)

    __call__ = validate

    def run_nested(self, validatable: Validatable[T], context: C) -> None:
        self._routine(validatable, context)

    def bind(self, context: C) -> Validator[T]:
        """Return a plain validator with *context* applied."""
        routine = self._routine
        return Validator(
            lambda validatable: routine(validatable, context),
            self._configuration,
            default_metadata=self._default_metadata,
        )


class AsyncValidator(_BaseValidator[T]):
    """A :class:`Validator` whose routine may await external work.

    The ambient registry is bound to the context of the run, so it stays
    reachable across suspension points and inside tasks spawned by the
    routine.
    """

    is_suspendable: ClassVar[bool] = True

    def __init__(
        self,
        routine: Callable[[Validatable[T]], Awaitable[object] | object],
        configuration: Configuration | None = None,
        *,
        default_metadata: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(configuration, default_metadata)
        self._routine = routine
        functools.update_wrapper(self, routine, updated=())

    async def validate(self, value: T) -> ValidationResult[T]:
        logger.debug("Async validation run started with %s", type(value).__name__)
        with constraint_registry_scope(self._configuration) as registry:
            await self.run_nested(self._root(value, registry))
        return _to_result(registry, value)

    __call__ = validate

    async def run_nested(self, validatable: Validatable[T]) -> None:
        outcome = self._routine(validatable)
        if inspect.isawaitable(outcome):
            await outcome


class AsyncContextualValidator(_BaseValidator[T], Generic[C, T]):
    """A :class:`ContextualValidator` whose routine may await external work."""

    is_suspendable: ClassVar[bool] = True

    def __init__(
        self,
        routine: Callable[[Validatable[T], C], Awaitable[object] | object],
        configuration: Configuration | None = None,
        *,
        default_metadata: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(configuration, default_metadata)
        self._routine = routine
        functools.update_wrapper(self, routine, updated=())

    async def validate(self, context: C, value: T) -> ValidationResult[T]:
        logger.debug(
            "Async contextual validation run started with %s", type(value).__name__
        )
        with constraint_registry_scope(self._configuration) as registry:
            await self.run_nested(self._root(value, registry), context)
        return _to_result(registry, value)

    __call__ = validate

    async def run_nested(self, validatable: Validatable[T], context: C) -> None:
        outcome = self._routine(validatable, context)
        if inspect.isawaitable(outcome):
            await outcome

    def bind(self, context: C) -> AsyncValidator[T]:
        """Return an async validator with *context* applied."""
        routine = self._routine
        return AsyncValidator(
            lambda validatable: routine(validatable, context),
            self._configuration,
            default_metadata=self._default_metadata,
        )
