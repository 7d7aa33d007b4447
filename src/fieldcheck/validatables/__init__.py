"""Validatables: values wrapped with their path in the object graph."""

from __future__ import annotations

from .compound import ValidatableCompound
from .validatable import Validatable, validatable_of

__all__ = [
    "Validatable",
    "ValidatableCompound",
    "validatable_of",
]
