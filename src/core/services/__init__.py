"""Core operations.

Each module is independent: none of these helpers call one another.
"""

from core.services.catalog import MIN_RATING, filter_by_rating, get_most_expensive_product
from core.services.days import get_day_type
from core.services.sequences import concatenate_arrays
from core.services.squaring import NegativeNumberError, square_async
from core.services.text import WRONG_INPUT_TYPE, format_string, process_value

__all__ = [
    "MIN_RATING",
    "NegativeNumberError",
    "WRONG_INPUT_TYPE",
    "concatenate_arrays",
    "filter_by_rating",
    "format_string",
    "get_day_type",
    "get_most_expensive_product",
    "process_value",
    "square_async",
]
