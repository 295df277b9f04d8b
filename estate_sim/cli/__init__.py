"""Interactive console front end."""

from estate_sim.cli.console import ConsoleReader, InputErrorKind, ParseResult
from estate_sim.cli.menu import MenuChoice, PlatformMenu

__all__ = ["ConsoleReader", "InputErrorKind", "MenuChoice", "ParseResult", "PlatformMenu"]
