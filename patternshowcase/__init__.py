"""Runnable demonstrations of the classic object-oriented design patterns."""

__version__ = "1.0.0"

__all__ = [
    "abstractfactory",
    "adapter",
    "bridge",
    "builder",
    "chain",
    "cli",
    "composite",
    "decorator",
    "facade",
    "factory",
    "flyweight",
    "iterator",
    "observer",
    "prototype",
    "proxy",
    "singleton",
    "state",
    "strategy",
    "templatemethod",
]