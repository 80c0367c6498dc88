"""Protocols implemented structurally by the domain models."""

from core.interfaces.describable import Describable

__all__ = ["Describable"]
