"""Paths locating a value inside the object graph being validated."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .validatables.validatable import Validatable

#: Ordered segments, root to leaf.
Path = tuple[str, ...]


class PathBuilder:
    """Builds paths relative to a :class:`~fieldcheck.validatables.Validatable`.

    Handed to :meth:`Constraint.with_path` transforms::

        constraint.with_path(lambda p: p.absolute("path", "to", "value"))
        constraint.with_path(lambda p: p.relative("sibling"))
        constraint.with_path(lambda p: p.appended("child"))

    Empty segments are legal and kept as-is.
    """

    def __init__(self, validatable: Validatable[Any]) -> None:
        self._validatable = validatable

    @property
    def original(self) -> Path:
        """The path of the validatable, before any rewrite."""
        return self._validatable.path

    def absolute(self, *segments: str) -> Path:
        """Return *segments* as a path, ignoring any ancestry."""
        return tuple(segments)

    def relative(self, *segments: str) -> Path:
        """Return the parent's path followed by *segments*.

        Behaves like :meth:`absolute` when the validatable has no parent.
        """
        parent = self._validatable.parent
        parent_path: Path = parent.path if parent is not None else ()
        return parent_path + tuple(segments)

    def appended(self, *segments: str) -> Path:
        """Return the validatable's own path followed by *segments*."""
        return self._validatable.path + tuple(segments)


def extend_path(parent: Validatable[Any] | None, segment: str | None) -> Path:
    """Compute the path of a node from its parent and declared segment.

    Anonymous nodes (``None`` or empty segment) share their parent's path.
    """
    base: Path = parent.path if parent is not None else ()
    if not segment:
        return base
    return (*base, segment)
