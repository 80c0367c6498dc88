"""Text and value transforms.

Two error models live side by side in this project; this module owns the
sentinel one: invalid input to `format_string` yields `WRONG_INPUT_TYPE`
instead of raising.
"""

from __future__ import annotations

import logging
import re

from core.domain.models import NumberValue, TextValue, Value

logger = logging.getLogger(__name__)

WRONG_INPUT_TYPE = "Wrong Input Type!"

_DIGITS_ONLY = re.compile(r"[0-9]+")


def format_string(text: str, to_upper: bool | None = None) -> str:
    """Upper- or lower-case `text`.

    `to_upper=None` behaves like `True`. Empty or digits-only text is rejected
    with the `WRONG_INPUT_TYPE` sentinel; mixed text such as `"abc123"` is valid.
    """

    if not text or _DIGITS_ONLY.fullmatch(text):
        logger.debug("Rejected input for format_string: %r", text)
        return WRONG_INPUT_TYPE
    if to_upper is None or to_upper:
        return text.upper()
    return text.lower()


def process_value(value: Value) -> float:
    """Length of a text value, or double a numeric one. Other inputs give 0."""

    match value:
        case TextValue(text=text):
            return len(text)
        case NumberValue(number=number):
            return number * 2
        case _:
            return 0
