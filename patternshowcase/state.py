"""State pattern: an ATM whose behaviour depends on the state it is in."""

from __future__ import annotations

from abc import ABC, abstractmethod

_RULE = "=" * 60
_BANNER = "=========================State Pattern======================"

CORRECT_PIN = 1234


def _check_amount(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} cannot be negative: {value}")


class ATMState(ABC):
    """What the machine does with each request while in one state."""

    def __init__(self, atm_machine: ATMMachine) -> None:
        self.atm_machine = atm_machine

    @abstractmethod
    def insert_card(self) -> None:
        """A card is put in."""

    @abstractmethod
    def eject_card(self) -> None:
        """The card is asked back."""

    @abstractmethod
    def insert_pin(self, pin_entered: int) -> None:
        """A PIN is typed."""

    @abstractmethod
    def request_cash(self, cash_to_withdraw: int) -> None:
        """Cash is asked for."""

    @abstractmethod
    def __str__(self) -> str:
        """Name of the state."""


class HasCard(ATMState):
    """A card is in; the PIN is awaited."""

    def insert_card(self) -> None:
        print("You can't enter more than one card")

    def eject_card(self) -> None:
        print("Card Ejected")
        self.atm_machine.atm_state = self.atm_machine.no_card_state

    def insert_pin(self, pin_entered: int) -> None:
        if pin_entered == CORRECT_PIN:
            print("Correct PIN")
            self.atm_machine.correct_pin_entered = True
            self.atm_machine.atm_state = self.atm_machine.has_pin_state
        else:
            print("Wrong PIN")
            self.atm_machine.correct_pin_entered = False
            print("Card Ejected")
            self.atm_machine.atm_state = self.atm_machine.no_card_state

    def request_cash(self, cash_to_withdraw: int) -> None:
        print("Enter PIN first")

    def __str__(self) -> str:
        return "Has Card"


class HasPin(ATMState):
    """A card is in and the right PIN was given; cash may be withdrawn."""

    def insert_card(self) -> None:
        print("You can't enter more than one card")

    def eject_card(self) -> None:
        print("Card Ejected")
        self.atm_machine.atm_state = self.atm_machine.no_card_state

    def insert_pin(self, pin_entered: int) -> None:
        print("Already entered PIN")

    def request_cash(self, cash_to_withdraw: int) -> None:
        machine = self.atm_machine
        if cash_to_withdraw > machine.cash_in_machine:
            print("Don't Have that Cash")
            print("Card Ejected")
            machine.atm_state = machine.no_card_state
            return
        print(f"{cash_to_withdraw} is provided by the machine")
        machine.cash_in_machine -= cash_to_withdraw
        print("Card Ejected")
        machine.atm_state = machine.no_card_state
        if machine.cash_in_machine <= 0:
            machine.atm_state = machine.no_cash_state

    def __str__(self) -> str:
        return "Has Pin"


class NoCard(ATMState):
    """Waiting for a card."""

    def insert_card(self) -> None:
        print("Please enter a PIN")
        self.atm_machine.atm_state = self.atm_machine.has_card_state

    def eject_card(self) -> None:
        print("Enter a card first")

    def insert_pin(self, pin_entered: int) -> None:
        print("Enter a card first")

    def request_cash(self, cash_to_withdraw: int) -> None:
        print("Enter a card first")

    def __str__(self) -> str:
        return "No Card"


class NoCash(ATMState):
    """The machine is empty and refuses everything."""

    def insert_card(self) -> None:
        print("We Don't Have Money")

    def eject_card(self) -> None:
        print("We Don't Have Money. You didn't enter a card")

    def insert_pin(self, pin_entered: int) -> None:
        print("We Don't Have Money")

    def request_cash(self, cash_to_withdraw: int) -> None:
        print("We Don't Have Money")

    def __str__(self) -> str:
        return "No Cash"


class ATMMachine:
    """An ATM that hands every request to its current state."""

    def __init__(self, cash_in_machine: int = 2000) -> None:
        _check_amount(cash_in_machine, "cash in machine")
        self.has_card_state: ATMState = HasCard(self)
        self.no_card_state: ATMState = NoCard(self)
        self.has_pin_state: ATMState = HasPin(self)
        self.no_cash_state: ATMState = NoCash(self)
        self.cash_in_machine = cash_in_machine
        self.correct_pin_entered = False
        self.atm_state: ATMState = (
            self.no_cash_state if cash_in_machine == 0 else self.no_card_state
        )

    @property
    def atm_data(self) -> ATMState:
        """The current state."""
        return self.atm_state

    def insert_card(self) -> None:
        self.atm_state.insert_card()

    def eject_card(self) -> None:
        self.atm_state.eject_card()

    def insert_pin(self, pin_entered: int) -> None:
        _check_amount(pin_entered, "PIN")
        self.atm_state.insert_pin(pin_entered)

    def request_cash(self, cash_to_withdraw: int) -> None:
        _check_amount(cash_to_withdraw, "cash requested")
        self.atm_state.request_cash(cash_to_withdraw)


def state_pattern() -> ATMMachine:
    """Take a card through the machine until it runs out of money."""
    print(_RULE)
    print(_BANNER)
    atm_machine = ATMMachine()
    atm_machine.insert_card()
    atm_machine.eject_card()
    atm_machine.insert_card()
    atm_machine.insert_pin(1234)
    atm_machine.request_cash(2000)
    atm_machine.insert_card()
    atm_machine.insert_pin(1234)
    print(_BANNER)
    print(_RULE)
    return atm_machine