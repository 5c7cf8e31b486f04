"""Command line interface: verify, watch, run and hint."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
from collections.abc import Iterable, Sequence
from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version
from itertools import dropwhile
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustlings.exercise import Exercise, load_exercises
from rustlings.run import run
from rustlings.verify import ExerciseError, verify

_BANNER = "\n".join(
    (
        "",
        r"       welcome to...                      ",
        r"                 _   _ _                  ",
        r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
        r" | '__| | | / __| __| | | '_ \ / _` / __| ",
        r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
        r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
        r"                               |___/      ",
        "",
    )
)

_DEBOUNCE_SECONDS = 2.0


def _version() -> str:
    try:
        return version("rustlings")
    except PackageNotFoundError:
        return "0.0.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustlings",
        description=(
            "Rustlings is a collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument("--version", action="version", version=_version())
    parser.set_defaults(command=None)
    sub = parser.add_subparsers(dest="alias")

    sub.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    ).set_defaults(command="verify")
    sub.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    ).set_defaults(command="watch")
    run_parser = sub.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_parser.add_argument("name")
    run_parser.set_defaults(command="run")
    hint_parser = sub.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_parser.add_argument("name")
    hint_parser.set_defaults(command="hint")
    return parser


def rustc_exists() -> bool:
    """Return True if `rustc --version` can be started and succeeds."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(exercises: Iterable[Exercise], name: str) -> Exercise:
    """Return the exercise with the given name or raise LookupError."""
    for exercise in exercises:
        if exercise.name == name:
            return exercise
    raise LookupError(f"no exercise named {name!r}")


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = Path(suffix).parts
    return len(parts) <= len(path.parts) and path.parts[len(path.parts) - len(parts):] == parts


def _clear_screen() -> None:
    print("\x1bc")


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue) -> None:
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def watch(exercises: Iterable[Exercise]) -> None:
    """Verify exercises and re-verify from the edited one whenever a file changes."""
    exercises = list(exercises)
    events: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        with suppress(ExerciseError):
            verify(exercises)
        while True:
            changed = [events.get()]
            while True:
                try:
                    changed.append(events.get(timeout=_DEBOUNCE_SECONDS))
                except queue.Empty:
                    break
            for path in dict.fromkeys(changed):
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                pending = dropwhile(lambda e: not _ends_with(filepath, e.path), exercises)
                _clear_screen()
                with suppress(ExerciseError):
                    verify(pending)
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the process exit code."""
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    if args.command is None:
        print(_BANNER)

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(Path("info.toml").read_text(encoding="utf-8"))

    match args.command:
        case "run" | "hint":
            try:
                exercise = find_exercise(exercises, args.name)
            except LookupError:
                print("No exercise found for your given name!")
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                run(exercise)
            except ExerciseError:
                return 1
            return 0
        case "verify":
            try:
                return 0 if verify(exercises) else 1
            except ExerciseError:
                return 1
        case "watch":
            watch(exercises)
            return 0
        case _:
            print(Path("default_out.txt").read_text(encoding="utf-8"))
            return 0


if __name__ == "__main__":
    raise SystemExit(main())