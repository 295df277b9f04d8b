"""Enumeration types for platform entities."""

from enum import Enum


class UserRole(str, Enum):
    BUYER = "Buyer"
    SELLER = "Seller"


class PropertyKind(str, Enum):
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
