"""ConstraintRegistry: the per-run collector of unsatisfied constraints.

The registry of the running validation is *ambient*: it lives in a
``ContextVar`` so predicate builders never have to pass it around. Tasks
spawned inside a run inherit it through context copying, while independent
runs (other tasks, other threads) each see their own.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import threading
from contextvars import ContextVar
from typing import TYPE_CHECKING

from .violation import ConstraintViolation, ConstraintViolationSet

if sys.version_info < (3, 11):
    from exceptiongroup import BaseExceptionGroup

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..configuration import Configuration
    from .constraint import Constraint

logger = logging.getLogger("fieldcheck.constraints")

#: ContextVar tracking the registry of the current run; ``None`` means we
#: are not inside any validation run.
_current_registry: ContextVar[ConstraintRegistry | None] = ContextVar(
    "constraint_registry", default=None
)


def get_current_registry() -> ConstraintRegistry | None:
    """Return the registry of the active run (or *None* outside of a run)."""
    return _current_registry.get()


class FirstViolationSignal(Exception):
    """Control signal stopping a fail-fast run at its first violation.

    Only ever raised and absorbed inside :func:`constraint_registry_scope`;
    callers of a validator never observe it.
    """

    def __init__(self, registry: ConstraintRegistry) -> None:
        self.registry = registry
        super().__init__("first violation reached")


class ConstraintRegistry:
    """Ordered storage for the unsatisfied constraints of one validation run."""

    def __init__(self, configuration: Configuration) -> None:
        self._configuration = configuration
        self._constraints: list[Constraint] = []
        self._lock = threading.Lock()
        self._short_circuited = False

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def short_circuited(self) -> bool:
        """Whether the run was stopped by the fail-fast signal."""
        return self._short_circuited

    def register(self, constraint: Constraint) -> None:
        """Register *constraint* if it is unsatisfied and not yet known."""
        if constraint.satisfied:
            return
        with self._lock:
            if not any(known is constraint for known in self._constraints):
                self._constraints.append(constraint)

    def check_first_violation(self) -> None:
        """Stop the run when fail-fast is enabled and a violation exists."""
        if not self._configuration.fail_on_first_violation:
            return
        with self._lock:
            if not self._constraints:
                return
            self._short_circuited = True
        raise FirstViolationSignal(self)

    def constraints(self) -> tuple[Constraint, ...]:
        with self._lock:
            return tuple(self._constraints)

    def __len__(self) -> int:
        return len(self._constraints)

    def to_violation_set(self) -> ConstraintViolationSet:
        """Convert the registered constraints into violations.

        Applies the default message and the root path of the configuration.
        After a fail-fast stop only the first violation is kept.
        """
        constraints = self.constraints()
        if self._short_circuited:
            constraints = constraints[:1]
        violations: list[ConstraintViolation] = [
            constraint.to_constraint_violation(
                self._configuration.default_violation_message,
                self._configuration.root_path,
            )
            for constraint in constraints
        ]
        return ConstraintViolationSet(violations)


@contextlib.contextmanager
def constraint_registry_scope(
    configuration: Configuration,
) -> Iterator[ConstraintRegistry]:
    """Open a fresh registry and make it ambient for the enclosed block.

    The fail-fast signal raised by this very registry is absorbed here, so the
    block simply ends early. Signals raised from concurrent tasks arrive wrapped
    in exception groups; those are absorbed when they hold nothing else.
    Signals belonging to another run and every other exception propagate.
    """
    registry = ConstraintRegistry(configuration)
    token = _current_registry.set(registry)
    try:
        yield registry
    except FirstViolationSignal as signal:
        if signal.registry is not registry:
            raise
        logger.debug("Fail-fast stop after the first violation")
    except BaseExceptionGroup as group:
        own, rest = group.split(
            lambda exc: isinstance(exc, FirstViolationSignal) and exc.registry is registry
        )
        if own is None:
            raise
        if rest is not None:
            raise rest from None
        logger.debug("Fail-fast stop after the first violation (task group)")
    finally:
        _current_registry.reset(token)
