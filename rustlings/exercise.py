"""Exercise descriptions, the compiler calls for them and their completion state."""

from __future__ import annotations

import os
import re
import subprocess
import tomllib
from contextlib import suppress
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
CONTEXT = 2

_I_AM_NOT_DONE = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)


def temp_file() -> str:
    """Return the path of the binary built for the current process."""
    return f"./temp_{os.getpid()}"


class Mode(StrEnum):
    """How an exercise is checked: built as a program or as a test harness."""

    COMPILE = "compile"
    TEST = "test"


@dataclass(frozen=True)
class ContextLine:
    """One source line shown around the `I AM NOT DONE` marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state of an exercise; an empty context means it is done."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """A single exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> subprocess.CompletedProcess:
        """Build the exercise with rustc into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]
        return subprocess.run(args, capture_output=True, check=False)

    def run(self) -> subprocess.CompletedProcess:
        """Run the binary produced by the last compile."""
        return subprocess.run([temp_file()], capture_output=True, check=False)

    def clean(self) -> None:
        """Remove the temporary binary, if there is one."""
        with suppress(OSError):
            os.remove(temp_file())

    def state(self) -> State:
        """Read the exercise file and report whether the marker is still there."""
        source = self.path.read_text(encoding="utf-8")
        if not _I_AM_NOT_DONE.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if _I_AM_NOT_DONE.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"marker in {self} does not sit on a single line")

        first = max(matched - CONTEXT, 0)
        window = lines[first : matched + CONTEXT + 1]
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(window, start=first)
            )
        )


def load_exercises(text: str) -> list[Exercise]:
    """Parse the contents of info.toml into a list of exercises."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as err:
        raise ValueError(f"missing field {err.args[0]!r} in exercise list") from None