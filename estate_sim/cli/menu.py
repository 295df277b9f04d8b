"""Interactive menu loop over the platform registry."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, TextIO

from estate_sim.cli.console import ConsoleReader, InputErrorKind
from estate_sim.exceptions import EstateSimError
from estate_sim.logging import get_logger
from estate_sim.models import Buyer, CommercialProperty, ResidentialProperty, Seller
from estate_sim.store import PurchaseOutcome, RealEstatePlatform

logger = get_logger(__name__)

MENU_TEXT = (
    "\n----- Real Estate Platform Menu -----\n"
    "1. Add Buyer\n"
    "2. Add Seller\n"
    "3. Add Residential Property\n"
    "4. Add Commercial Property\n"
    "5. Display Users\n"
    "6. Display Properties\n"
    "7. Buy Property\n"
    "8. Exit\n"
    "-------------------------------------"
)
CHOICE_PROMPT = "Enter your choice: "
INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a number."

PURCHASE_MESSAGES = {
    PurchaseOutcome.SUCCESS: "Property bought successfully!",
    PurchaseOutcome.INVALID_INDICES: "Invalid indices!",
    PurchaseOutcome.NOT_A_BUYER: "Invalid buyer or property!",
}


class MenuChoice(IntEnum):
    ADD_BUYER = 1
    ADD_SELLER = 2
    ADD_RESIDENTIAL = 3
    ADD_COMMERCIAL = 4
    DISPLAY_USERS = 5
    DISPLAY_PROPERTIES = 6
    BUY_PROPERTY = 7
    EXIT = 8


# A handler returns the input fault that cut it short, or None.
Handler = Callable[[], InputErrorKind | None]


class PlatformMenu:
    """Read numbered commands and apply them to a ``RealEstatePlatform``.

    Parameters
    ----------
    platform : RealEstatePlatform
        Registry to mutate and query.
    reader : ConsoleReader | None
        Operator input (stdin by default).
    out : TextIO | None
        Menu and results (stdout by default).
    err : TextIO | None
        Error reports (stderr by default).
    """

    def __init__(
        self,
        platform: RealEstatePlatform,
        reader: ConsoleReader | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.platform = platform
        self.reader = reader or ConsoleReader()
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self._handlers: dict[MenuChoice, Handler] = {
            MenuChoice.ADD_BUYER: self._add_buyer,
            MenuChoice.ADD_SELLER: self._add_seller,
            MenuChoice.ADD_RESIDENTIAL: self._add_residential,
            MenuChoice.ADD_COMMERCIAL: self._add_commercial,
            MenuChoice.DISPLAY_USERS: self._display_users,
            MenuChoice.DISPLAY_PROPERTIES: self._display_properties,
            MenuChoice.BUY_PROPERTY: self._buy_property,
        }

    def run(self) -> int:
        """Loop until the exit command or end of input.

        Returns
        -------
        int
            Process exit status, always 0.
        """
        while True:
            self._emit(MENU_TEXT)
            self._prompt(CHOICE_PROMPT)

            choice = self.reader.read_int()
            if choice.error is InputErrorKind.END_OF_INPUT:
                logger.info("End of input, leaving menu")
                break
            if not choice.ok:
                self._report_input_fault()
                continue

            if choice.value == MenuChoice.EXIT:
                self._emit("Exiting the program.")
                break

            handler = self._handlers.get(choice.value)
            if handler is None:
                logger.debug("Unknown menu choice %d", choice.value)
                self._emit("Invalid choice. Please try again.")
                continue

            try:
                fault = handler()
            except EstateSimError as e:
                logger.warning("Menu choice %d failed: %s", choice.value, e)
                self._error(f"Error: {e}")
                self.reader.discard_line()
                continue

            if fault is InputErrorKind.END_OF_INPUT:
                logger.info("End of input, leaving menu")
                break
            if fault is not None:
                self._report_input_fault()

        return 0

    # -- handlers -----------------------------------------------------

    def _add_buyer(self) -> InputErrorKind | None:
        self._prompt("Enter buyer's username: ")
        username = self.reader.read_token()
        if not username.ok:
            return username.error
        self.platform.add_user(Buyer(username.value))
        return None

    def _add_seller(self) -> InputErrorKind | None:
        self._prompt("Enter seller's username: ")
        username = self.reader.read_token()
        if not username.ok:
            return username.error
        self.platform.add_user(Seller(username.value))
        return None

    def _add_residential(self) -> InputErrorKind | None:
        self._prompt("Enter property location: ")
        location = self.reader.read_token()
        if not location.ok:
            return location.error
        self._prompt("Enter property price: $")
        price = self.reader.read_decimal()
        if not price.ok:
            return price.error
        self._prompt("Enter number of bedrooms: ")
        bedrooms = self.reader.read_int()
        if not bedrooms.ok:
            return bedrooms.error

        self.platform.add_property(ResidentialProperty(location.value, price.value, bedrooms.value))
        return None

    def _add_commercial(self) -> InputErrorKind | None:
        self._prompt("Enter property location: ")
        location = self.reader.read_token()
        if not location.ok:
            return location.error
        self._prompt("Enter property price: $")
        price = self.reader.read_decimal()
        if not price.ok:
            return price.error
        self._prompt("Enter business type: ")
        # Business type may contain spaces, so it is read as a whole line
        self.reader.skip_char()
        business_type = self.reader.read_line()
        if not business_type.ok:
            return business_type.error

        self.platform.add_property(CommercialProperty(location.value, price.value, business_type.value))
        return None

    def _display_users(self) -> None:
        self._emit("Users on the Platform:")
        for user in self.platform.get_users():
            self._emit(f"Username: {user.get_username()}, Type: {user.get_user_type()}")

    def _display_properties(self) -> None:
        self._emit("Properties on the Platform:")
        for prop in self.platform.get_properties():
            prop.display(self.out)

    def _buy_property(self) -> InputErrorKind | None:
        self._emit("Buyers on the Platform:")
        for index, buyer in self.platform.buyers():
            self._emit(f"{index}. {buyer.username}")
        self._prompt("Enter the index of the buyer: ")
        buyer_index = self.reader.read_int()
        if not buyer_index.ok:
            return buyer_index.error

        self._emit("Properties on the Platform:")
        for index, prop in enumerate(self.platform.get_properties()):
            self._emit(f"{index}. {prop.describe()}")
        self._prompt("Enter the index of the property to buy: ")
        property_index = self.reader.read_int()
        if not property_index.ok:
            return property_index.error

        outcome = self.platform.purchase(buyer_index.value, property_index.value)
        self._emit(PURCHASE_MESSAGES[outcome])
        if outcome is PurchaseOutcome.SUCCESS:
            buyer = self.platform.user_at(buyer_index.value)
            buyer.display(self.platform.get_property, self.out)
        return None

    # -- output -------------------------------------------------------

    def _emit(self, text: str) -> None:
        print(text, file=self.out)

    def _prompt(self, text: str) -> None:
        print(text, end="", file=self.out, flush=True)

    def _error(self, text: str) -> None:
        print(text, file=self.err, flush=True)

    def _report_input_fault(self) -> None:
        self.reader.discard_line()
        logger.debug("Discarded malformed numeric input")
        self._error(f"Error: {INVALID_NUMBER_MESSAGE}")
