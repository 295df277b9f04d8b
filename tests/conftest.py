"""Pytest configuration and fixtures."""

import io
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

import pytest

from estate_sim.cli.console import ConsoleReader
from estate_sim.cli.menu import PlatformMenu
from estate_sim.models import CommercialProperty, ResidentialProperty
from estate_sim.store import RealEstatePlatform


@dataclass
class MenuRun:
    """Captured result of one scripted menu session."""

    platform: RealEstatePlatform
    status: int
    out: str
    err: str


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def platform() -> RealEstatePlatform:
    """Fresh, empty registry."""
    return RealEstatePlatform()


@pytest.fixture
def oak_street() -> ResidentialProperty:
    """Unregistered residential property."""
    return ResidentialProperty("Oak St", Decimal("250000"), 3)


@pytest.fixture
def market_square() -> CommercialProperty:
    """Unregistered commercial property."""
    return CommercialProperty("Market Square", Decimal("480000.50"), "Coffee shop")


@pytest.fixture
def run_menu() -> Callable[..., MenuRun]:
    """Run the menu over scripted operator input."""

    def _run(script: str, platform: RealEstatePlatform | None = None) -> MenuRun:
        platform = platform if platform is not None else RealEstatePlatform()
        out, err = io.StringIO(), io.StringIO()
        menu = PlatformMenu(platform, ConsoleReader(io.StringIO(script)), out=out, err=err)
        status = menu.run()
        return MenuRun(platform=platform, status=status, out=out.getvalue(), err=err.getvalue())

    return _run
