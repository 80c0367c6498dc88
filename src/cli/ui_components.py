"""Rich building blocks shared by the CLI commands (tables, panels, numbers)."""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Product, RatedItem
from core.interfaces import Describable


def format_number(value: float) -> str:
    """Render a number without rounding: `152399025`, `2.5`, `0.1`."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_items_table(items: Iterable[RatedItem], *, title: str = "Rated Items") -> Table:
    table = Table(title=title)
    table.add_column("Title", style="cyan", no_wrap=True)
    table.add_column("Rating", style="green", justify="right")
    for item in items:
        table.add_row(item.title, format_number(item.rating))
    return table


def build_products_table(products: Iterable[Product], *, title: str = "Products") -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Price", style="magenta", justify="right")
    for product in products:
        table.add_row(product.name, format_number(product.price))
    return table


def build_description_panel(subject: Describable, *extra_lines: str) -> Panel:
    """Panel with the description of any `Describable` plus optional lines."""

    body = Text(subject.get_info())
    for line in extra_lines:
        body.append("\n" + line)
    return Panel(body, title=Text("Vehicle", style="bold yellow"), border_style="yellow")
