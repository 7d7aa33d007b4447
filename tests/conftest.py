from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from fieldcheck.validation import Failure, Validator

Messages = Callable[..., list[str]]


@pytest.fixture
def messages() -> Messages:
    """Run one predicate builder in a fresh validation, returning its messages."""

    def run(builder: Callable[..., Any], value: Any, *args: Any, **kwargs: Any) -> list[str]:
        result = Validator(lambda v: builder(v, *args, **kwargs))(value)
        if isinstance(result, Failure):
            return [violation.message for violation in result.violations]
        return []

    return run
