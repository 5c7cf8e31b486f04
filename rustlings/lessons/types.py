"""Worked solutions for the enums, structs, modules, move semantics and macros lessons."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

_FRUIT = "Pear"
_VEGGIE = "Cucumber"


@dataclass(frozen=True)
class Quit:
    """Message asking the machine to stop."""


@dataclass(frozen=True)
class Echo:
    """Message carrying text to print."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message moving the machine to a new position."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Message setting a new RGB colour."""

    red: int
    green: int
    blue: int


Message = Quit | Echo | Move | ChangeColor


@dataclass
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass
class Machine:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the machine."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                print(text)
            case Move(x, y):
                self.position = Point(x, y)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass(frozen=True)
class ColorClassicStruct:
    """A named colour with its hex code, accessed by field name."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A named colour with its hex code, accessed by position."""

    name: str
    hex: str


class UnitStruct:
    """A type without fields."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass(frozen=True)
class Order:
    """An order placed by a customer."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the template order other orders are built from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


def make_sausage() -> str:
    """Print and return what the sausage factory makes."""
    product = "sausage!"
    print(product)
    return product


def favorite_snacks() -> str:
    """Print and return the favourite fruit and vegetable."""
    message = f"favorite snacks: {_FRUIT} and {_VEGGIE}"
    print(message)
    return message


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """Return a new list holding the given items followed by 22, 44 and 66."""
    filled = list(vec) if vec is not None else []
    filled += [22, 44, 66]
    return filled


def my_macro(*args: object) -> str:
    """Print and return a message; with one argument, include its value."""
    match args:
        case ():
            message = "Check out my macro!"
        case (value,):
            message = f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")
    print(message)
    return message


def greeting(name: str) -> str:
    """Return a greeting for the given name."""
    return f"Hello {name}"