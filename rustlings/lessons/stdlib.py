"""Worked solutions for the standard library types and threads lessons."""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

_U64_MAX = (1 << 64) - 1


class DivisionError(ArithmeticError):
    """A division could not produce an integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def capitalize_first(text: str) -> str:
    """Return the text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalize the first character of each word."""
    return [capitalize_first(word) for word in words]


def capitalize_into_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them into one string."""
    return "".join(capitalize_first(word) for word in words)


def divide(a: int, b: int) -> int:
    """Divide a by b if it divides evenly, otherwise raise a DivisionError."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number, raising the first DivisionError met."""
    return [divide(n, divisor) for n in numbers]


def divide_each(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Divide every number, keeping each result or the error it gave."""

    def attempt(n: int) -> int | DivisionError:
        try:
            return divide(n, divisor)
        except DivisionError as err:
            return err

    return [attempt(n) for n in numbers]


def factorial(num: int) -> int:
    """Return num! for an unsigned 64-bit value."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result


def offset_sums(
    numbers: Sequence[int], offsets: Iterable[int] = range(8), stride: int = 5
) -> dict[int, int]:
    """Sum numbers[offset::stride] for each offset, one thread per offset, sharing the sequence."""
    if stride <= 0:
        raise ValueError("stride must be positive")
    offsets = list(offsets)

    def worker(offset: int) -> int:
        total = sum(numbers[offset::stride])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=max(len(offsets), 1)) as pool:
        sums = list(pool.map(worker, offsets))
    return dict(zip(offsets, sums))


class _JobStatus:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._completed = 0

    def complete_one(self) -> None:
        with self._lock:
            self._completed += 1

    @property
    def completed(self) -> int:
        with self._lock:
            return self._completed


def run_jobs(total: int = 10, interval: float = 0.25) -> int:
    """Complete jobs on a worker thread while the caller waits; return jobs completed."""
    if total < 0:
        raise ValueError("total must not be negative")
    status = _JobStatus()

    def worker() -> None:
        for _ in range(total):
            time.sleep(interval)
            status.complete_one()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    while status.completed < total:
        print("waiting... ")
        time.sleep(interval * 2)
    thread.join()
    return status.completed