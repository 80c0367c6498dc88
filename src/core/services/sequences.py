"""Sequence helpers."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, TypeVar

T = TypeVar("T")


def concatenate_arrays(*arrays: Iterable[T]) -> list[T]:
    """Flatten the given sequences, left to right, into a new list."""

    return list(chain.from_iterable(arrays))
