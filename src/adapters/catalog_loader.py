"""Loading of JSON collections.

Supported formats:
- Rated items: {"items": [{"title": ..., "rating": ...}, ...]}
- Products:    {"products": [{"name": ..., "price": ...}, ...]}

A bare JSON list is accepted as well.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from core.domain.models import Product, RatedItem


class RatedItemsFile(BaseModel):
    items: list[RatedItem] = Field(default_factory=list)


class ProductsFile(BaseModel):
    products: list[Product] = Field(default_factory=list)


def _read_json(path: Path, key: str) -> Any:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        return {key: data}
    return data


def load_rated_items(path: Path) -> list[RatedItem]:
    return RatedItemsFile.model_validate(_read_json(path, "items")).items


def load_products(path: Path) -> list[Product]:
    return ProductsFile.model_validate(_read_json(path, "products")).products
