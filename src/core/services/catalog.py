"""Selection helpers over rated items and products.

The threshold, ordering and tie-break rules live here rather than in the CLI,
so they work on plain lists.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import Product, RatedItem

MIN_RATING = 4


def filter_by_rating(items: Sequence[RatedItem], *, min_rating: float = MIN_RATING) -> list[RatedItem]:
    """Return the items rated at least `min_rating`, in their original order.

    The input sequence is not modified.
    """

    return [item for item in items if item.rating >= min_rating]


def get_most_expensive_product(products: list[Product] | None, *, in_place: bool = True) -> Product | None:
    """Return the highest-priced product.

    Contract:
    - `products is None` or an empty list returns `None`.
    - The list is sorted by ascending price and its last element returned.
      With `in_place=True` the caller's list is reordered; pass
      `in_place=False` to sort a copy instead.
    - The sort is stable, so among equal top prices the last one in input
      order wins.
    """

    if products is None:
        return None

    ordered = products if in_place else list(products)
    ordered.sort(key=lambda product: product.price)
    if not ordered:
        return None
    return ordered[-1]
