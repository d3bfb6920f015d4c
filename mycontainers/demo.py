"""Prints a container in each of the available orders."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .container import MyContainer
from .iterators import (
    AscendingOrder,
    DescendingOrder,
    MiddleOutOrder,
    Order,
    ReverseOrder,
    SideCrossOrder,
)

_VIEWS = [
    ("AscendingOrder", AscendingOrder),
    ("DescendingOrder", DescendingOrder),
    ("Order (insertion)", Order),
    ("ReverseOrder", ReverseOrder),
    ("SideCrossOrder", SideCrossOrder),
    ("MiddleOutOrder", MiddleOutOrder),
]


def print_header(title: str) -> None:
    """Write a section header to standard output."""
    sys.stdout.write(f"\n=== {title} ===\n")


def _show(label: str, container: MyContainer) -> None:
    sys.stdout.write(f"Original container({label}): {container}\n")
    for title, view in _VIEWS:
        print_header(title)
        for item in view(container):
            sys.stdout.write(f"{item} ")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    numbers = MyContainer()
    for value in (7, 15, 6, 1, 2):
        numbers.add(value)
    _show("int", numbers)
    sys.stdout.write("\n\n\n")

    words = MyContainer()
    for word in ("hello", "leon", "amit", "computers", "grand theft auto"):
        words.add(word)
    _show("string", words)
    sys.stdout.write("\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())