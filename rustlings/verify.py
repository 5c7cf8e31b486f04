"""Checking exercises in order until one fails or is not yet finished."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from rustlings.exercise import Exercise, Mode

_console = Console(highlight=False, soft_wrap=True)


class ExerciseError(Exception):
    """An exercise failed to compile or its program or tests failed."""

    def __init__(self, exercise: Exercise, reason: str) -> None:
        super().__init__(f"{exercise}: {reason}")
        self.exercise = exercise
        self.reason = reason


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _success(message: str) -> None:
    _console.print(Text(f"✅ {message}", style="green"))


def _failure(message: str) -> None:
    _console.print(Text(f"⚠️  {message}", style="red"))


def verify(exercises: Iterable[Exercise]) -> bool:
    """Check exercises in order; return False at the first one still marked pending."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            done = _compile_and_test(exercise, skip_prompt=False)
        else:
            done = _compile_only(exercise)
        if not done:
            return False
    return True


def test(exercise: Exercise) -> None:
    """Build and run the tests of one exercise without asking about completion."""
    _compile_and_test(exercise, skip_prompt=True)


def _compile_only(exercise: Exercise) -> bool:
    try:
        with _console.status(Text(f"Compiling {exercise}...")):
            output = exercise.compile()
        if output.returncode != 0:
            _failure(f"Compilation of {exercise} failed! Compiler error message:\n")
            print(_decode(output.stderr))
            raise ExerciseError(exercise, "compilation failed")
        _success(f"Successfully compiled {exercise}!")
    finally:
        exercise.clean()
    return _prompt_for_completion(exercise)


def _compile_and_test(exercise: Exercise, skip_prompt: bool) -> bool:
    try:
        with _console.status(Text(f"Testing {exercise}...")) as status:
            output = exercise.compile()
            if output.returncode == 0:
                status.update(Text(f"Running {exercise}..."))
                result = exercise.run()
        if output.returncode != 0:
            _failure(f"Compiling of {exercise} failed! Please try again. Here's the output:")
            print(_decode(output.stderr))
            raise ExerciseError(exercise, "compilation failed")
        if result.returncode != 0:
            _failure(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(_decode(result.stdout))
            raise ExerciseError(exercise, "tests failed")
        _success(f"Successfully tested {exercise}!")
    finally:
        exercise.clean()
    return skip_prompt or _prompt_for_completion(exercise)


def _prompt_for_completion(exercise: Exercise) -> bool:
    state = exercise.state()
    if state.done:
        return True

    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    else:
        success_msg = "The code is compiling, and the tests pass!"

    print()
    print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()
    print("You can keep working on this exercise,")
    _console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        _console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False