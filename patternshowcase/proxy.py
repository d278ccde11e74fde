"""Proxy pattern: read-only access to an ATM's data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from patternshowcase.state import ATMMachine, ATMState

_RULE = "=" * 60
_BANNER = "========================Proxy Pattern======================="


class GetATMData(ABC):
    """What may be read from an ATM."""

    @property
    @abstractmethod
    def atm_data(self) -> ATMState:
        """The ATM's current state."""

    @property
    @abstractmethod
    def cash_in_machine(self) -> int:
        """The cash the ATM holds."""


GetATMData.register(ATMMachine)


class ATMProxy(GetATMData):
    """Reads an ATM's data without exposing anything that changes it."""

    @property
    def atm_data(self) -> ATMState:
        return ATMMachine().atm_data

    @property
    def cash_in_machine(self) -> int:
        return ATMMachine().cash_in_machine


def proxy_pattern() -> ATMProxy:
    """Read the state and cash of an ATM through the proxy."""
    print(_RULE)
    print(_BANNER)
    atm_proxy = ATMProxy()
    print(f"Current ATM State: {atm_proxy.atm_data}")
    print(f"Cash in ATM Machine: {atm_proxy.cash_in_machine}")
    print(_BANNER)
    print(_RULE)
    return atm_proxy