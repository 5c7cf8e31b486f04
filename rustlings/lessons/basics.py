"""Worked solutions for the variables, functions, if, primitive types and strings lessons."""

from __future__ import annotations

from collections.abc import Sequence

_BULK_THRESHOLD = 40
_REGULAR_APPLE_PRICE = 2
_BULK_APPLE_PRICE = 1

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def calculate_apple_price(quantity: int) -> int:
    """Price of an order: 2 per apple, or 1 per apple for more than 40."""
    if quantity > _BULK_THRESHOLD:
        return quantity * _BULK_APPLE_PRICE
    return quantity * _REGULAR_APPLE_PRICE


def times_two(num: int) -> int:
    """Return twice the given number."""
    return num * 2


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def call_me(num: int) -> list[str]:
    """Print and return one ring message for each of `num` calls."""
    rings = [f"Ring! Call number {i}" for i in range(1, num + 1)]
    for ring in rings:
        print(ring)
    return rings


def is_even(num: int) -> bool:
    """Return True if the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices drop by 10, odd prices by 3."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the square of a number."""
    return num * num


def describe_character(character: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(items: Sequence[object]) -> str:
    """Comment on the size of a sequence; 100 items or more is big."""
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def middle_slice(items: Sequence[object]) -> Sequence[object]:
    """Return the sequence without its first and last element."""
    return items[1:-1]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a (name, age) tuple."""
    name, age = cat
    return f"{name} is {age} years old."


def second_number(numbers: Sequence[int]) -> int:
    """Return the second element of a sequence."""
    return numbers[1]


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True if the word is one of the known colour words."""
    return attempt in _COLOR_WORDS