"""Chain of responsibility: calculators that pass a request on until one handles it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

_RULE = "=" * 60
_BANNER = "================Chain of Responsibility Pattern============="


@dataclass(frozen=True)
class Numbers:
    """Two numbers and the name of the calculation wanted on them."""

    number1: int
    number2: int
    calc_wanted: str


class Chain(ABC):
    """One link of the chain."""

    def __init__(self) -> None:
        self.next_in_chain: Chain | None = None

    def set_next_chain(self, next_chain: Chain) -> None:
        """Set the link that gets requests this one cannot handle."""
        self.next_in_chain = next_chain

    @abstractmethod
    def calculate(self, request: Numbers) -> int | None:
        """Handle the request or pass it on; return the result, if any."""

    def _pass_on(self, request: Numbers) -> int | None:
        if self.next_in_chain is None:
            raise RuntimeError(
                f"no link after {type(self).__name__} for {request.calc_wanted!r}"
            )
        return self.next_in_chain.calculate(request)


def _report(request: Numbers, symbol: str, result: int) -> int:
    print(f"{request.number1} {symbol} {request.number2} = {result}")
    return result


class AddNumbers(Chain):
    def calculate(self, request: Numbers) -> int | None:
        if request.calc_wanted == "add":
            return _report(request, "+", request.number1 + request.number2)
        return self._pass_on(request)


class SubtractNumbers(Chain):
    def calculate(self, request: Numbers) -> int | None:
        if request.calc_wanted == "sub":
            return _report(request, "-", request.number1 - request.number2)
        return self._pass_on(request)


class MultNumbers(Chain):
    def calculate(self, request: Numbers) -> int | None:
        if request.calc_wanted == "mult":
            return _report(request, "*", request.number1 * request.number2)
        return self._pass_on(request)


class DivideNumbers(Chain):
    """The last link: divides, truncating toward zero, or gives up."""

    def calculate(self, request: Numbers) -> int | None:
        if request.calc_wanted == "div":
            a, b = request.number1, request.number2
            if b == 0:
                raise ZeroDivisionError("division by zero")
            quotient = abs(a) // abs(b)
            if (a < 0) != (b < 0):
                quotient = -quotient
            return _report(request, "/", quotient)
        print("Only works for add, sub, mult, ad div")
        return None


def build_chain() -> Chain:
    """Link add, subtract, multiply and divide, and return the first link."""
    links = [AddNumbers(), SubtractNumbers(), MultNumbers(), DivideNumbers()]
    for current, following in zip(links, links[1:]):
        current.set_next_chain(following)
    return links[0]


def chain_of_responsibility_pattern() -> int | None:
    """Send a division through the chain and return its result."""
    print(_RULE)
    print(_BANNER)
    result = build_chain().calculate(Numbers(4, 2, "div"))
    print(_BANNER)
    print(_RULE)
    return result