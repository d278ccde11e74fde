"""Observer pattern: a stock price publisher and its subscribers."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod

_RULE = "=" * 60
_BANNER = "======================Observer Pattern======================"


class Observer(ABC):
    """Receives price updates."""

    @abstractmethod
    def update(self, ibm_price: float, aapl_price: float, goog_price: float) -> None:
        """Take the current prices."""


class Subject(ABC):
    """Publishes updates to registered observers."""

    @abstractmethod
    def register_observer(self, observer: Observer) -> None:
        """Add an observer."""

    @abstractmethod
    def unregister_observer(self, observer: Observer) -> None:
        """Remove an observer."""

    @abstractmethod
    def notify_observers(self) -> None:
        """Send the current state to every observer."""


class StockGrabber(Subject):
    """Holds three stock prices; every change notifies all observers."""

    def __init__(self) -> None:
        self.observers: list[Observer] = []
        self._ibm_price = 0.0
        self._aapl_price = 0.0
        self._goog_price = 0.0

    @property
    def ibm_price(self) -> float:
        return self._ibm_price

    @ibm_price.setter
    def ibm_price(self, price: float) -> None:
        self._ibm_price = price
        self.notify_observers()

    @property
    def aapl_price(self) -> float:
        return self._aapl_price

    @aapl_price.setter
    def aapl_price(self, price: float) -> None:
        self._aapl_price = price
        self.notify_observers()

    @property
    def goog_price(self) -> float:
        return self._goog_price

    @goog_price.setter
    def goog_price(self, price: float) -> None:
        self._goog_price = price
        self.notify_observers()

    def register_observer(self, observer: Observer) -> None:
        self.observers.append(observer)

    def unregister_observer(self, observer: Observer) -> None:
        self.observers = [o for o in self.observers if o is not observer]
        print("Observer removed")

    def notify_observers(self) -> None:
        for observer in list(self.observers):
            observer.update(self._ibm_price, self._aapl_price, self._goog_price)


class StockObserver(Observer):
    """Registers itself with a subject and prints every update it gets."""

    _ids = itertools.count(1)

    def __init__(self, stock_grabber: Subject) -> None:
        self.stock_grabber = stock_grabber
        self.observer_id = next(StockObserver._ids)
        self.ibm_price = 0.0
        self.aapl_price = 0.0
        self.goog_price = 0.0
        print(f"New Observer {self.observer_id}")
        stock_grabber.register_observer(self)

    def update(self, ibm_price: float, aapl_price: float, goog_price: float) -> None:
        self.ibm_price = ibm_price
        self.aapl_price = aapl_price
        self.goog_price = goog_price
        print(self._prices_text())

    def close(self) -> None:
        """Unregister from the subject."""
        self.stock_grabber.unregister_observer(self)

    def __enter__(self) -> StockObserver:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _prices_text(self) -> str:
        return (
            f"Observer{self.observer_id}\nIBM: {self.ibm_price:g}"
            f"\nAAPL: {self.aapl_price:g}\nGOOG: {self.goog_price:g}\n"
        )


def _set_prices(grabber: StockGrabber) -> None:
    grabber.ibm_price = 197.00
    grabber.aapl_price = 677.60
    grabber.goog_price = 676.40


def observer_pattern() -> None:
    """Show observers subscribing to and leaving a stock publisher."""
    print(_RULE)
    print(_BANNER)
    stock_grabber = StockGrabber()
    with StockObserver(stock_grabber):
        _set_prices(stock_grabber)
        with StockObserver(stock_grabber) as observer2:
            _set_prices(stock_grabber)
            stock_grabber.unregister_observer(observer2)
            _set_prices(stock_grabber)
            print(_BANNER)
            print(_RULE)