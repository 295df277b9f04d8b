"""User models for the listing platform."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, Inexact, localcontext
from typing import Callable, TextIO

from estate_sim.exceptions import EntityNotFoundError, InvalidEntityStateError
from estate_sim.logging import get_logger
from estate_sim.models.enums import UserRole
from estate_sim.models.property import Property, format_money

logger = get_logger(__name__)

PropertyLookup = Callable[[int], Property]

BILL_PRECISION = 60


def _require_registered(prop: Property) -> int:
    if prop.property_id is None:
        raise EntityNotFoundError(f"Property at {prop.location} is not registered on the platform")
    return prop.property_id


@dataclass
class User(ABC):
    """Platform participant.

    Users hold property ids, never the property records themselves. The
    registry owns both and resolves ids through a ``PropertyLookup``.
    """

    username: str
    user_id: int | None = field(default=None, kw_only=True)

    @property
    @abstractmethod
    def role(self) -> UserRole:
        """Role tag, fixed at construction."""

    @property
    def user_type(self) -> str:
        return self.role.value

    def get_username(self) -> str:
        return self.username

    def get_user_type(self) -> str:
        return self.user_type

    def describe(self) -> str:
        """Identity line."""
        return f"{self.user_type} User: {self.username}"

    def describe_lines(self, lookup: PropertyLookup) -> list[str]:
        """Full display, one entry per output line."""
        return [self.describe()]

    def display(self, lookup: PropertyLookup, out: TextIO | None = None) -> None:
        """Write the full display to ``out`` (stdout by default)."""
        stream = out or sys.stdout
        for line in self.describe_lines(lookup):
            print(line, file=stream)


@dataclass
class Buyer(User):
    """User who purchases properties and accumulates a bill."""

    owned_property_ids: list[int] = field(default_factory=list)
    total_bill: Decimal = Decimal("0")

    @property
    def role(self) -> UserRole:
        return UserRole.BUYER

    def buy_property(self, prop: Property) -> None:
        """Take ownership of ``prop`` and add its bill to the running total.

        Buying the same property twice, or a property another buyer
        owns, is allowed.

        Raises
        ------
        EntityNotFoundError
            If ``prop`` was never registered.
        InvalidEntityStateError
            If the new total cannot be represented exactly. Nothing is
            changed in that case.
        """
        property_id = _require_registered(prop)
        bill = prop.calculate_bill()
        with localcontext() as ctx:
            ctx.prec = BILL_PRECISION
            ctx.traps[Inexact] = True
            try:
                new_total = self.total_bill + bill
            except Inexact:
                raise InvalidEntityStateError(
                    f"Total bill for {self.username} would lose precision"
                ) from None

        self.owned_property_ids.append(property_id)
        self.total_bill = new_total
        logger.info(
            "Buyer %s bought property %d for %s (total %s)",
            self.username,
            property_id,
            format_money(bill),
            format_money(self.total_bill),
        )

    def calculate_total_bill(self) -> Decimal:
        return self.total_bill

    def describe_lines(self, lookup: PropertyLookup) -> list[str]:
        lines = super().describe_lines(lookup)
        lines.append("Owned Properties:")
        lines.extend(lookup(property_id).describe() for property_id in self.owned_property_ids)
        lines.append(f"Total Bill: ${format_money(self.total_bill)}")
        return lines


@dataclass
class Seller(User):
    """User who lists properties."""

    listed_property_ids: list[int] = field(default_factory=list)

    @property
    def role(self) -> UserRole:
        return UserRole.SELLER

    def list_property(self, prop: Property) -> None:
        """Append ``prop`` to the listing; duplicates are kept."""
        property_id = _require_registered(prop)
        self.listed_property_ids.append(property_id)
        logger.debug("Seller %s listed property %d", self.username, property_id)

    def remove_property(self, prop: Property) -> None:
        """Accepted and ignored. Listings are never revoked."""
        logger.debug(
            "Ignoring removal of property %s from seller %s",
            prop.property_id,
            self.username,
        )

    def get_listed_property_ids(self) -> list[int]:
        return list(self.listed_property_ids)

    def describe_lines(self, lookup: PropertyLookup) -> list[str]:
        lines = super().describe_lines(lookup)
        lines.append("Listed Properties:")
        lines.extend(lookup(property_id).describe() for property_id in self.listed_property_ids)
        return lines
