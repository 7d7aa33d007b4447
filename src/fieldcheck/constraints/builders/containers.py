"""Membership predicates for collections, strings and mappings.

``None`` always satisfies them. Mapping keys and values get dedicated
builders since ``in`` only looks at keys.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import TYPE_CHECKING, Any

from ..constraint import constrain_if_not_null

if TYPE_CHECKING:
    from ...validatables.validatable import Validatable
    from ..constraint import Constraint


def is_containing(
    validatable: Validatable[Collection[Any] | None], item: Any
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: item in value).otherwise(
        lambda: f'Must contain "{item}"'
    )


def is_not_containing(
    validatable: Validatable[Collection[Any] | None], item: Any
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: item not in value).otherwise(
        lambda: f'Must not contain "{item}"'
    )


def _has_unique_elements(value: Collection[Any]) -> bool:
    seen: list[Any] = []
    for element in value:
        if element in seen:
            return False
        seen.append(element)
    return True


def has_no_duplicates(validatable: Validatable[Collection[Any] | None]) -> Constraint:
    return constrain_if_not_null(validatable, _has_unique_elements).otherwise(
        "Must contain unique elements"
    )


def is_containing_key(
    validatable: Validatable[Mapping[Any, Any] | None], key: Any
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: key in value).otherwise(
        lambda: f'Must contain key "{key}"'
    )


def is_not_containing_key(
    validatable: Validatable[Mapping[Any, Any] | None], key: Any
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: key not in value).otherwise(
        lambda: f'Must not contain key "{key}"'
    )


def is_containing_value(
    validatable: Validatable[Mapping[Any, Any] | None], item: Any
) -> Constraint:
    return constrain_if_not_null(validatable, lambda value: item in value.values()).otherwise(
        lambda: f'Must contain value "{item}"'
    )


def is_not_containing_value(
    validatable: Validatable[Mapping[Any, Any] | None], item: Any
) -> Constraint:
    return constrain_if_not_null(
        validatable, lambda value: item not in value.values()
    ).otherwise(lambda: f'Must not contain value "{item}"')
