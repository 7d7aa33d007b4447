"""Immutable value objects shared by configuration and violations."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

VO = TypeVar("VO", bound="ValueObject")


def _hashable(value: Any) -> Any:
    if isinstance(value, dict):
        return tuple(sorted((key, _hashable(item)) for key, item in value.items()))
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    return value


class ValueObject(BaseModel):
    """Frozen pydantic model compared and hashed by its field values.

    Unknown fields are rejected. Use :meth:`replace` to derive a modified copy;
    the copy goes through validation again.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def _key(self) -> tuple[Any, ...]:
        return tuple(_hashable(getattr(self, name)) for name in type(self).model_fields)

    def replace(self: VO, **changes: Any) -> VO:
        return type(self).model_validate({**self.model_dump(), **changes})

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))
