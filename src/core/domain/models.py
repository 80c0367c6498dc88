"""Domain models (Pydantic v2).

Every model is frozen: operations receive caller data and never rewrite it.
Text fields accept any string, including the empty one; validation only
rejects values of the wrong type (e.g. a price that is not a number).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RatedItem(BaseModel):
    """An item with a title and a numeric score."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(
        ...,
        description="Human readable title of the item.",
    )
    rating: float = Field(
        ...,
        description="Score compared against the rating threshold.",
    )


class Product(BaseModel):
    """A catalog entry with a name and a price."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        ...,
        description="Product name.",
    )
    price: float = Field(
        ...,
        description="Unit price, used as the sort key.",
    )


class Vehicle(BaseModel):
    """Base vehicle data. Owns no external resources."""

    model_config = ConfigDict(frozen=True)

    make: str = Field(..., description="Manufacturer.")
    year: int = Field(..., description="Model year.")

    @classmethod
    def create(cls, make: str, year: int) -> "Vehicle":
        return cls(make=make, year=year)

    def get_info(self) -> str:
        return f"Make: {self.make}, Year: {self.year}"


class Car(BaseModel):
    """A vehicle specialization that carries a model name.

    A `Car` embeds its `Vehicle` instead of inheriting from it; the behavior
    both share is the `Describable` contract.
    """

    model_config = ConfigDict(frozen=True)

    vehicle: Vehicle
    model: str = Field(..., description="Model name.")

    @classmethod
    def create(cls, make: str, year: int, model: str) -> "Car":
        """Build a car from its flat fields, delegating base fields to `Vehicle`."""

        return cls(vehicle=Vehicle.create(make, year), model=model)

    @property
    def make(self) -> str:
        return self.vehicle.make

    @property
    def year(self) -> int:
        return self.vehicle.year

    def get_info(self) -> str:
        return self.vehicle.get_info()

    def get_model(self) -> str:
        return f"Model: {self.model}"


class TextValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class NumberValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    number: float


# Tagged union: the `kind` field picks the variant when validating raw data.
Value = Annotated[Union[TextValue, NumberValue], Field(discriminator="kind")]
