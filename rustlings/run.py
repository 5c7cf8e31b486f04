"""Running or testing a single exercise."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from rustlings.exercise import Exercise, Mode
from rustlings.verify import ExerciseError, test

_console = Console(highlight=False, soft_wrap=True)


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def run(exercise: Exercise) -> None:
    """Run a compile exercise or the tests of a test exercise."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Build the exercise, run it and show its output."""
    try:
        with _console.status(Text(f"Compiling {exercise}...")) as status:
            output = exercise.compile()
            status.update(Text(f"Running {exercise}..."))
            if output.returncode == 0:
                result = exercise.run()

        if output.returncode != 0:
            _console.print(
                Text(
                    f"⚠️  Compilation of {exercise} failed! Compiler error message:\n",
                    style="red",
                )
            )
            print(_decode(output.stderr))
            raise ExerciseError(exercise, "compilation failed")

        print(_decode(result.stdout))
        if result.returncode != 0:
            print(_decode(result.stderr))
            _console.print(Text(f"⚠️  Ran {exercise} with errors", style="red"))
            raise ExerciseError(exercise, "program failed")
        _console.print(Text(f"✅ Successfully ran {exercise}", style="green"))
    finally:
        exercise.clean()