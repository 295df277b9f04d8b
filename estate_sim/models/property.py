"""Property models for the listing platform."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TextIO

from estate_sim.exceptions import InvalidEntityStateError
from estate_sim.models.enums import PropertyKind


# Prices stay below a quadrillion with at most ten decimal places, so
# running totals can be summed exactly.
MAX_PRICE = Decimal("1e15")
MAX_PRICE_PLACES = 10


def format_money(amount: Decimal) -> str:
    """Format a monetary amount with two decimals."""
    return f"{amount:.2f}"


@dataclass(frozen=True)
class Property(ABC):
    """Listed property.

    Instances are immutable. The registry assigns ``property_id`` by
    returning a copy of the record, so an unregistered property has
    ``property_id`` of ``None``.
    """

    location: str
    price: Decimal
    property_id: int | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if not self.price.is_finite() or self.price < 0:
            raise InvalidEntityStateError(f"Property price must be a non-negative amount, got {self.price}")
        if self.price >= MAX_PRICE or self.price.as_tuple().exponent < -MAX_PRICE_PLACES:
            raise InvalidEntityStateError(
                f"Property price must be below {MAX_PRICE:f} with at most {MAX_PRICE_PLACES} decimal places"
            )

    @property
    @abstractmethod
    def kind(self) -> PropertyKind:
        """Variant tag."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable one-line description."""

    @abstractmethod
    def calculate_bill(self) -> Decimal:
        """Amount charged to a buyer for this property."""

    def get_location(self) -> str:
        return self.location

    def get_price(self) -> Decimal:
        return self.price

    def display(self, out: TextIO | None = None) -> None:
        """Write the description line to ``out`` (stdout by default)."""
        print(self.describe(), file=out or sys.stdout)


@dataclass(frozen=True)
class ResidentialProperty(Property):
    """Home with a bedroom count."""

    bedrooms: int

    @property
    def kind(self) -> PropertyKind:
        return PropertyKind.RESIDENTIAL

    def describe(self) -> str:
        return (
            f"Residential Property: {self.location}, Bedrooms: {self.bedrooms}, "
            f"Price: ${format_money(self.price)}"
        )

    def calculate_bill(self) -> Decimal:
        # No residential taxes or fees yet
        return self.price


@dataclass(frozen=True)
class CommercialProperty(Property):
    """Business premises with a free-text business type."""

    business_type: str

    @property
    def kind(self) -> PropertyKind:
        return PropertyKind.COMMERCIAL

    def describe(self) -> str:
        return (
            f"Commercial Property: {self.location}, Business Type: {self.business_type}, "
            f"Price: ${format_money(self.price)}"
        )

    def calculate_bill(self) -> Decimal:
        # No commercial taxes or fees yet
        return self.price
