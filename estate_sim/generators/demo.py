"""Demo users and properties for trying the menu without typing them in."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from estate_sim.generators.base import BaseGenerator
from estate_sim.logging import get_logger
from estate_sim.models import Buyer, CommercialProperty, Property, ResidentialProperty, Seller, User
from estate_sim.store import RealEstatePlatform

logger = get_logger(__name__)


class UserGenerator(BaseGenerator):
    """Generate buyers and sellers with realistic usernames."""

    def _username(self) -> str:
        # The menu reads usernames as single tokens
        return "".join(self.fake.user_name().split())

    def generate_buyer(self) -> Buyer:
        return Buyer(self._username())

    def generate_seller(self) -> Seller:
        return Seller(self._username())

    def generate_batch(self, count: int) -> Iterator[User]:
        """Generate ``count`` users, alternating buyer and seller.

        Parameters
        ----------
        count : int
            Number of users to generate.

        Yields
        ------
        User
            Buyer first, then seller, and so on.
        """
        for i in range(count):
            yield self.generate_buyer() if i % 2 == 0 else self.generate_seller()


class PropertyGenerator(BaseGenerator):
    """Generate residential and commercial properties."""

    BUSINESS_TYPES = [
        "Retail",
        "Office",
        "Restaurant",
        "Warehouse",
        "Coffee shop",
        "Medical clinic",
        "Fitness studio",
    ]

    # Price ranges in thousands
    RESIDENTIAL_PRICE_RANGE = (120, 1500)
    COMMERCIAL_PRICE_RANGE = (300, 5000)

    def generate_residential(self) -> ResidentialProperty:
        price = random.randint(*self.RESIDENTIAL_PRICE_RANGE) * 1000
        return ResidentialProperty(
            self.fake.street_name(),
            Decimal(price),
            random.randint(1, 6),
        )

    def generate_commercial(self) -> CommercialProperty:
        price = random.randint(*self.COMMERCIAL_PRICE_RANGE) * 1000
        return CommercialProperty(
            self.fake.street_name(),
            Decimal(price),
            random.choice(self.BUSINESS_TYPES),
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate ``count`` properties, alternating residential and commercial."""
        for i in range(count):
            yield self.generate_residential() if i % 2 == 0 else self.generate_commercial()


class DemoDataGenerator:
    """Seed a platform with generated users and properties.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale for usernames and street names.
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.users = UserGenerator(seed=seed, locale=locale)
        self.properties = PropertyGenerator(seed=seed, locale=locale)

    def populate(self, platform: RealEstatePlatform, num_users: int, num_properties: int) -> None:
        """Register generated records on ``platform``.

        Sellers list the generated properties round-robin. Nothing is
        listed when no seller was generated.
        """
        sellers: list[Seller] = []
        for user in self.users.generate_batch(num_users):
            platform.add_user(user)
            if isinstance(user, Seller):
                sellers.append(user)

        for i, prop in enumerate(self.properties.generate_batch(num_properties)):
            registered = platform.add_property(prop)
            if sellers:
                sellers[i % len(sellers)].list_property(registered)

        logger.info(
            "Seeded %d users (%d sellers) and %d properties",
            num_users,
            len(sellers),
            num_properties,
        )
