"""Command line interface.

One command per operation. The commands only parse input, call the Core and
render the result; every rule lives in `core.services`.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.catalog_loader import load_products, load_rated_items
from adapters.json_exporter import export_models_json
from cli.ui_components import build_description_panel, build_items_table, build_products_table, format_number
from core.config import AppSettings
from core.domain.days import Day
from core.domain.models import Car, NumberValue, Product, RatedItem, TextValue, Vehicle
from core.logging import configure_logging
from core.services import (
    NegativeNumberError,
    concatenate_arrays,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
    square_async,
)

app = typer.Typer(no_args_is_help=True, help="Small typed exercises: strings, collections, vehicles, days and async.")

_console = Console()


def _split_pair(raw: str, option: str) -> tuple[str, str]:
    name, sep, value = raw.rpartition("=")
    if not sep:
        raise typer.BadParameter(f"expected NAME=NUMBER, got {raw!r}", param_hint=option)
    return name.strip(), value.strip()


def _parse_items(raw_items: list[str]) -> list[RatedItem]:
    items: list[RatedItem] = []
    for raw in raw_items:
        title, rating = _split_pair(raw, "--item")
        try:
            items.append(RatedItem(title=title, rating=rating))
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_hint="--item") from exc
    return items


def _parse_products(raw_products: list[str]) -> list[Product]:
    products: list[Product] = []
    for raw in raw_products:
        name, price = _split_pair(raw, "--product")
        try:
            products.append(Product(name=name, price=price))
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_hint="--product") from exc
    return products


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override the configured log level."),
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


@app.command(name="format")
def format_command(
    text: str = typer.Argument(..., help="Text to convert."),
    lower: bool = typer.Option(False, "--lower", help="Lower-case instead of upper-case."),
) -> None:
    """Upper-case (default) or lower-case a text value."""

    _console.print(format_string(text, to_upper=False if lower else None), markup=False, highlight=False)


@app.command(name="filter-ratings")
def filter_ratings(
    file: Path | None = typer.Option(None, "--file", exists=True, dir_okay=False, help="JSON file with items."),
    item: list[str] | None = typer.Option(None, "--item", help="Inline item as TITLE=RATING (repeatable)."),
    min_rating: float | None = typer.Option(None, "--min-rating", help="Inclusive threshold."),
    output: Path | None = typer.Option(None, "--output", help="Write the selected items as JSON."),
) -> None:
    """Keep the items rated at or above the threshold."""

    items = _parse_items(item or [])
    if file is not None:
        try:
            items = load_rated_items(file) + items
        except (ValidationError, json.JSONDecodeError) as exc:
            raise typer.BadParameter(str(exc), param_hint="--file") from exc

    threshold = min_rating if min_rating is not None else AppSettings().min_rating
    selected = filter_by_rating(items, min_rating=threshold)
    _console.print(build_items_table(selected, title=f"Rated >= {format_number(threshold)}"))

    if output is not None:
        path = export_models_json(models=selected, output_path=output, key="items")
        _console.print(f"[green]Saved:[/green] {path}")


@app.command()
def concat(
    arrays: list[str] | None = typer.Argument(None, help="Comma separated sequences, e.g. 1,2 3 ''."),
) -> None:
    """Concatenate comma separated sequences in order."""

    sequences = [[part for part in raw.split(",") if part] for raw in arrays or []]
    _console.print(json.dumps(concatenate_arrays(*sequences)), markup=False, highlight=False)


@app.command()
def vehicle(
    make: str = typer.Argument(...),
    year: int = typer.Argument(...),
    model: str | None = typer.Option(None, "--model", help="Describe a car of this model."),
) -> None:
    """Describe a vehicle, or a car when --model is given."""

    try:
        if model is None:
            panel = build_description_panel(Vehicle.create(make, year))
        else:
            car = Car.create(make, year, model)
            panel = build_description_panel(car, car.get_model())
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _console.print(panel)


@app.command()
def process(
    text: str | None = typer.Option(None, "--text", help="Text value: prints its length."),
    number: float | None = typer.Option(None, "--number", help="Numeric value: prints it doubled."),
) -> None:
    """Length of a text value or double of a number."""

    if (text is None) == (number is None):
        raise typer.BadParameter("pass exactly one of --text or --number")

    value = TextValue(text=text) if text is not None else NumberValue(number=number)
    _console.print(format_number(process_value(value)), markup=False, highlight=False)


@app.command(name="most-expensive")
def most_expensive(
    file: Path | None = typer.Option(None, "--file", exists=True, dir_okay=False, help="JSON file with products."),
    product: list[str] | None = typer.Option(None, "--product", help="Inline product as NAME=PRICE (repeatable)."),
    keep_order: bool = typer.Option(False, "--keep-order", help="Sort a copy instead of the loaded list."),
    output: Path | None = typer.Option(None, "--output", help="Write the list, as left after the call, as JSON."),
) -> None:
    """Find the highest-priced product."""

    products = _parse_products(product or [])
    if file is not None:
        try:
            products = load_products(file) + products
        except (ValidationError, json.JSONDecodeError) as exc:
            raise typer.BadParameter(str(exc), param_hint="--file") from exc

    best = get_most_expensive_product(products, in_place=not keep_order)
    if best is None:
        _console.print("[yellow]No products given.[/yellow]")
        raise typer.Exit(code=1)

    _console.print(build_products_table(products))
    _console.print(f"Most expensive: {best.name} ({format_number(best.price)})", markup=False, highlight=False)

    if output is not None:
        path = export_models_json(models=products, output_path=output, key="products")
        _console.print(f"[green]Saved:[/green] {path}")


@app.command(name="day-type")
def day_type(day: str = typer.Argument(..., help="Day name, e.g. saturday or Sat.")) -> None:
    """Classify a day as Weekday or Weekend."""

    try:
        parsed = Day.from_name(day)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="DAY") from exc
    _console.print(f"{parsed.label()}: {get_day_type(parsed).value}", markup=False, highlight=False)


@app.command(context_settings={"ignore_unknown_options": True})
def square(
    n: float = typer.Argument(..., help="Number to square."),
    delay: float | None = typer.Option(None, "--delay", min=0, help="Seconds to wait before resolving."),
) -> None:
    """Square a number after a delay."""

    try:
        result = asyncio.run(square_async(n, delay=delay))
    except NegativeNumberError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    _console.print(format_number(result), markup=False, highlight=False)


def run() -> None:
    app()
