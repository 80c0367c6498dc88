"""
Unit tests for the delayed asynchronous square.
Coroutines are driven with `asyncio.run`, as the CLI does.
"""

import asyncio
import time
from unittest.mock import AsyncMock, patch

import pytest

from core.services.squaring import NegativeNumberError, square_async


def test_square_resolves_after_delay() -> None:
    started = time.perf_counter()

    result = asyncio.run(square_async(5, delay=0.05))

    assert result == 25
    assert time.perf_counter() - started >= 0.04


@pytest.mark.parametrize("n", [0, 1, 2, 7, 12])
def test_square_is_repeatable(n: int) -> None:
    assert asyncio.run(square_async(n, delay=0)) == n * n
    assert asyncio.run(square_async(n, delay=0)) == n * n


def test_negative_input_fails_before_any_delay() -> None:
    with patch("core.services.squaring.asyncio.sleep", new_callable=AsyncMock) as sleep:
        with pytest.raises(NegativeNumberError, match="Negative number is not allowed") as exc:
            asyncio.run(square_async(-1))

    sleep.assert_not_awaited()
    assert exc.value.value == -1
    assert isinstance(exc.value, ValueError)


def test_default_delay_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPED_BASICS_SQUARE_DELAY_SECONDS", "0.25")

    with patch("core.services.squaring.asyncio.sleep", new_callable=AsyncMock) as sleep:
        assert asyncio.run(square_async(3)) == 9

    sleep.assert_awaited_once_with(0.25)


def test_concurrent_calls_do_not_interact() -> None:
    async def run_all() -> list[float]:
        return await asyncio.gather(*(square_async(n, delay=0.01) for n in (1, 2, 3)))

    assert asyncio.run(run_all()) == [1, 4, 9]
