"""Command that runs the pattern demonstrations."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from patternshowcase.abstractfactory import abstract_factory_pattern
from patternshowcase.adapter import adapter_pattern
from patternshowcase.bridge import bridge_pattern
from patternshowcase.builder import builder_pattern
from patternshowcase.chain import chain_of_responsibility_pattern
from patternshowcase.composite import composite_pattern
from patternshowcase.decorator import decorator_pattern
from patternshowcase.facade import facade_pattern
from patternshowcase.factory import factory_pattern
from patternshowcase.flyweight import flyweight_pattern
from patternshowcase.iterator import iterator_pattern
from patternshowcase.observer import observer_pattern
from patternshowcase.prototype import prototype_pattern
from patternshowcase.proxy import proxy_pattern
from patternshowcase.singleton import singleton_pattern
from patternshowcase.state import state_pattern
from patternshowcase.strategy import strategy_pattern
from patternshowcase.templatemethod import template_method_pattern

_Runner = Callable[[argparse.Namespace], object]

_PATTERNS: dict[str, _Runner] = {
    "strategy": lambda args: strategy_pattern(),
    "observer": lambda args: observer_pattern(),
    "factory": lambda args: factory_pattern(args.ship),
    "abstractfactory": lambda args: abstract_factory_pattern(),
    "singleton": lambda args: singleton_pattern(),
    "builder": lambda args: builder_pattern(),
    "prototype": lambda args: prototype_pattern(),
    "decorator": lambda args: decorator_pattern(),
    "adapter": lambda args: adapter_pattern(),
    "bridge": lambda args: bridge_pattern(),
    "templatemethod": lambda args: template_method_pattern(),
    "iterator": lambda args: iterator_pattern(),
    "facade": lambda args: facade_pattern(),
    "flyweight": lambda args: flyweight_pattern(),
    "state": lambda args: state_pattern(),
    "chain": lambda args: chain_of_responsibility_pattern(),
    "composite": lambda args: composite_pattern(),
    "proxy": lambda args: proxy_pattern(),
}

DEFAULT_PATTERNS = (
    "strategy",
    "observer",
    "factory",
    "abstractfactory",
    "singleton",
    "builder",
    "prototype",
    "decorator",
    "adapter",
    "bridge",
    "templatemethod",
    "iterator",
    "facade",
    "flyweight",
    "state",
    "chain",
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternshowcase",
        description="Run design pattern demonstrations.",
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help="patterns to run, in order (default: the standard set); "
        "one of: " + ", ".join(_PATTERNS),
    )
    parser.add_argument(
        "--ship",
        choices=("U", "R", "B"),
        default=None,
        help="ship type for the factory demonstration instead of asking",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen demonstrations, or the standard set, and return 0."""
    parser = _parser()
    args = parser.parse_args(argv)
    names = args.patterns or list(DEFAULT_PATTERNS)
    unknown = [name for name in names if name not in _PATTERNS]
    if unknown:
        parser.error("unknown pattern: " + ", ".join(unknown))
    for name in names:
        _PATTERNS[name](args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())