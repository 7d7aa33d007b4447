"""Concurrent, independent runs never observe each other's violations."""

from __future__ import annotations

import asyncio
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from fieldcheck.constraints import ConstraintViolation, constrain, constrain_async
from fieldcheck.validatables import Validatable
from fieldcheck.validation import AsyncValidator, Failure, Validator

RUNS = 50


def _expected(n: int) -> set[ConstraintViolation]:
    return {
        ConstraintViolation(f"first-{n}", ["id"]),
        ConstraintViolation(f"second-{n}", ["id"]),
    }


@pytest.mark.asyncio
async def test_concurrent_async_runs_are_isolated() -> None:
    async def routine(value: Validatable[dict[str, int]]) -> None:
        identifier = value["id"]
        n = identifier.value
        await asyncio.sleep(0)
        (await constrain_async(identifier, lambda _: False)).otherwise(f"first-{n}")
        await asyncio.sleep(0.001 * (n % 3))
        constrain(identifier, lambda _: False).otherwise(f"second-{n}")

    validate = AsyncValidator(routine)

    results = await asyncio.gather(*(validate({"id": n}) for n in range(RUNS)))

    for n, result in enumerate(results):
        assert isinstance(result, Failure)
        assert result.violations == _expected(n)


def test_concurrent_threaded_runs_are_isolated() -> None:
    def routine(value: Validatable[dict[str, int]]) -> None:
        identifier = value["id"]
        n = identifier.value
        constrain(identifier, lambda _: False).otherwise(f"first-{n}")
        time.sleep(0.001 * (n % 3))
        constrain(identifier, lambda _: False).otherwise(f"second-{n}")

    validate = Validator(routine)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda n: validate({"id": n}), range(RUNS)))

    for n, result in enumerate(results):
        assert isinstance(result, Failure)
        assert result.violations == _expected(n)
