"""Worked solutions for the error handling lessons."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO

_INTEGER = re.compile(r"[+-]?[0-9]+")

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly, limited to the given width."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


class CreationError(ValueError):
    """A value cannot become a positive nonzero integer."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self, message: str = "Negative") -> None:
        super().__init__(message)


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self, message: str = "Zero") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise ZeroError()
        if self.value < 0:
            raise NegativeError()


def generate_nametag_text(name: str) -> str:
    """Return nametag text, or raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed-in quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


def pop_too_much() -> bool:
    """Pop from a one-element list twice, handling the empty case gracefully."""
    items = [3]
    if items:
        print(f"The last item in the list is {items.pop()}")
    if items:
        print(f"The second-to-last item in the list is {items.pop()}")
    else:
        print("There is no second-to-last item in the list")
    return True


def read_and_validate(stream: IO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a PositiveNonzeroInteger.

    Read errors propagate as OSError, bad numbers as ValueError and
    out-of-range values as CreationError.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))