"""Platform registry that owns every user and property."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, TypeVar, cast

from estate_sim.exceptions import EntityNotFoundError, InvalidEntityStateError
from estate_sim.logging import get_logger
from estate_sim.models import Buyer, Property, User, UserRole

logger = get_logger(__name__)

P = TypeVar("P", bound=Property)


class PurchaseOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    INVALID_INDICES = "INVALID_INDICES"
    NOT_A_BUYER = "NOT_A_BUYER"


@dataclass
class RealEstatePlatform:
    """Append-only in-memory registry.

    Records live in arenas keyed by stable integer ids. The operator
    addresses them by position in registration order, which is what
    ``get_users()`` and ``get_properties()`` return.
    """

    _users: dict[int, User] = field(default_factory=dict)
    _properties: dict[int, Property] = field(default_factory=dict)
    _next_user_id: int = 0
    _next_property_id: int = 0

    def add_user(self, user: User) -> User:
        """Register a user and assign its id."""
        if user.user_id is not None:
            raise InvalidEntityStateError(f"User {user.username} is already registered")

        user.user_id = self._next_user_id
        self._next_user_id += 1
        self._users[user.user_id] = user
        logger.info("Registered %s %s as user %d", user.user_type, user.username, user.user_id)
        return user

    def add_property(self, prop: P) -> P:
        """Register a property and return the registered record.

        Properties are immutable, so the stored record is a copy of
        ``prop`` carrying the assigned id.
        """
        if prop.property_id is not None:
            raise InvalidEntityStateError(f"Property {prop.property_id} is already registered")

        registered = replace(prop, property_id=self._next_property_id)
        self._next_property_id += 1
        self._properties[registered.property_id] = registered
        logger.info("Registered property %d: %s", registered.property_id, registered.describe())
        return registered

    def get_users(self) -> tuple[User, ...]:
        return tuple(self._users.values())

    def get_properties(self) -> tuple[Property, ...]:
        return tuple(self._properties.values())

    def get_user(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise EntityNotFoundError(f"User {user_id} not found") from None

    def get_property(self, property_id: int) -> Property:
        try:
            return self._properties[property_id]
        except KeyError:
            raise EntityNotFoundError(f"Property {property_id} not found") from None

    def user_at(self, index: int) -> User | None:
        """User at an operator-visible position, or None if out of range."""
        users = self.get_users()
        if 0 <= index < len(users):
            return users[index]
        return None

    def property_at(self, index: int) -> Property | None:
        """Property at an operator-visible position, or None if out of range."""
        properties = self.get_properties()
        if 0 <= index < len(properties):
            return properties[index]
        return None

    def buyers(self) -> Iterator[tuple[int, Buyer]]:
        """Yield (position, buyer) for every user with the buyer role."""
        for index, user in enumerate(self._users.values()):
            if user.role == UserRole.BUYER:
                yield index, cast(Buyer, user)

    def purchase(self, buyer_index: int, property_index: int) -> PurchaseOutcome:
        """Have the buyer at ``buyer_index`` buy the property at ``property_index``.

        Nothing is mutated unless the outcome is ``SUCCESS``.
        """
        user = self.user_at(buyer_index)
        prop = self.property_at(property_index)
        if user is None or prop is None:
            logger.warning(
                "Rejected purchase: indices out of range (buyer=%d, property=%d)",
                buyer_index,
                property_index,
            )
            return PurchaseOutcome.INVALID_INDICES

        if user.role != UserRole.BUYER:
            logger.warning("Rejected purchase: user %s is a %s", user.username, user.user_type)
            return PurchaseOutcome.NOT_A_BUYER

        cast(Buyer, user).buy_property(prop)
        return PurchaseOutcome.SUCCESS
