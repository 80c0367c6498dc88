"""Structural contract for objects that can describe themselves.

`Vehicle` and `Car` both satisfy it without inheriting from each other.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    """`get_info` returns the text; emitting it is left to the caller."""

    def get_info(self) -> str:
        """Return a one-line human readable description."""

        ...
