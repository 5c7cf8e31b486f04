# rustlings

A command-line runner for small Rust exercises. It compiles each exercise
with `rustc`, runs its program or its tests, and tells you when to move on to
the next one. Worked solutions to the exercises, written in Python, come with
it under `rustlings.lessons`.

## Requirements

- Python 3.11 or later
- A Rust toolchain with `rustc` on your `PATH` (check with `rustc --version`)

## Installation

```
pip install .
```

To run the package's own test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

Run the `rustlings` command from a directory that holds an `info.toml`
exercise list. Started anywhere else it prints an error and exits with
status 1; it does the same if `rustc --version` cannot be run.

```
rustlings                 # show the welcome banner, then the contents of default_out.txt
rustlings verify          # work through all exercises in order (alias: v)
rustlings watch           # rerun verify each time an exercise file changes (alias: w)
rustlings run NAME        # compile and run, or test, a single exercise (alias: r)
rustlings hint NAME       # print the hint for an exercise (alias: h)
```

`verify` stops at the first exercise that fails to compile, fails when run,
or still carries its `I AM NOT DONE` marker, and exits with status 1. In the
last case it shows the lines around the marker; delete the marker once you
are happy with your solution to move on.

`watch` verifies everything once, then watches the `./exercises` directory.
Changes are collected until two seconds pass without another one; for each
changed `.rs` file it clears the screen and verifies again, starting from the
exercise whose path that file ends with.

`run` never asks about the marker: it succeeds as soon as the exercise
compiles and runs (or its tests pass). `run` and `hint` exit with status 1
and print `No exercise found for your given name!` for an unknown name.

Compiled binaries are written to `./temp_<pid>` in the current directory and
removed after each check.

## The exercise list

`info.toml` lists the exercises in the order they should be done. Every
entry needs `name`, `path`, `mode` and `hint`:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."

[[exercises]]
name = "tests1"
path = "exercises/tests/tests1.rs"
mode = "test"
hint = "What does `assert!` expect as its argument?"
```

`mode = "compile"` exercises are built with `rustc` and run;
`mode = "test"` exercises are built with `rustc --test` and their tests run.

## Using the library

```python
from pathlib import Path

from rustlings.exercise import load_exercises
from rustlings.verify import ExerciseError, verify

exercises = load_exercises(Path("info.toml").read_text())
try:
    finished = verify(exercises)   # False if an exercise is still marked pending
except ExerciseError as err:
    print("failed:", err.exercise.name, err.reason)
```

- `rustlings.exercise`: `Exercise` (with `compile()`, `run()`, `clean()` and
  `state()`), `Mode`, `State`, `ContextLine`, `load_exercises()` and
  `temp_file()`. `Exercise.state()` returns a `State` whose `done` is true
  when the marker is gone, and whose `context` holds the lines around the
  marker otherwise. `load_exercises()` raises `ValueError` for an entry with
  a missing field.
- `rustlings.verify`: `verify()`, `test()` and `ExerciseError`.
- `rustlings.run`: `run()` and `compile_and_run()`, which raise
  `ExerciseError` on failure.
- `rustlings.cli`: `main()`, `watch()`, `find_exercise()` and `rustc_exists()`.

## Worked solutions

`rustlings.lessons` holds Python solutions to the exercises, by topic:

- `basics`: variables, functions, `if`, primitive types and strings
  (`calculate_apple_price`, `bigger`, `sale_price`, `is_a_color_word`, ...).
- `errors`: error handling (`generate_nametag_text`, `total_cost`,
  `read_and_validate`, `PositiveNonzeroInteger` with `NegativeError` and
  `ZeroError`, ...).
- `types`: enums, structs, modules, move semantics and macros (`Machine` and
  its messages `Quit`, `Echo`, `Move`, `ChangeColor`, `Order`, `fill_vec`,
  `my_macro`, `greeting`, ...).
- `stdlib`: iterators and threads (`capitalize_first`, `divide` with
  `NotDivisibleError` and `DivideByZeroError`, `factorial`, `offset_sums`,
  `run_jobs`, ...).

## What this package does not include

It ships no Rust exercise files, no `info.toml` and no `default_out.txt`.
The `rustlings` command works only in a directory that provides them, and it
does not install or manage a Rust toolchain.