"""Domain models for the listing platform."""

from estate_sim.models.enums import PropertyKind, UserRole
from estate_sim.models.property import (
    CommercialProperty,
    Property,
    ResidentialProperty,
    format_money,
)
from estate_sim.models.user import Buyer, PropertyLookup, Seller, User

__all__ = [
    "Buyer",
    "CommercialProperty",
    "Property",
    "PropertyKind",
    "PropertyLookup",
    "ResidentialProperty",
    "Seller",
    "User",
    "UserRole",
    "format_money",
]
