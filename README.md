# drillkit

drillkit is a library for working with a set of small practice exercises. Each
exercise is a source file with a deliberate mistake in it. drillkit reads the
exercise list, compiles and runs an exercise with `rustc`, and tells you whether
you have marked the exercise as finished.

## Installing

```
pip install .
```

Compiling exercises needs `rustc` on your `PATH` (and `cargo` for exercises in
clippy mode). Paths in the exercise list are taken relative to the current
directory.

## Loading exercises

`drillkit.exercise.load_exercises(text)` parses the text of an `info.toml` file
and returns a list of `Exercise` objects. Every `[[exercises]]` entry needs
`name`, `path`, `mode` and `hint`; a missing field raises `ValueError`.

```python
from pathlib import Path
from drillkit.exercise import load_exercises

exercises = load_exercises(Path("info.toml").read_text())
```

`mode` is one of `compile`, `test` or `clippy` (the `Mode` enum).

## Checking progress

An exercise counts as pending while its file holds a line such as
`// I AM NOT DONE`.

- `Exercise.state()` returns a `State`. A finished exercise has an empty
  `context`; a pending one holds the `ContextLine`s around the marker (two lines
  either side), each with its `line`, its 1-based `number` and whether it is the
  `important` marker line.
- `State.is_done()` and `Exercise.looks_done()` tell whether the marker is gone.

## Compiling and running

`Exercise.compile()` builds the exercise into a temporary executable and returns
a `CompiledExercise`; if compilation fails it raises `CompilationError`, whose
`output` holds the compiler's `stdout` and `stderr`. Test-mode exercises are
built as a test harness. Clippy-mode exercises write
`./exercises/clippy/Cargo.toml` and are linted with `cargo clippy`, treating
warnings as errors.

`CompiledExercise.run()` runs the executable and returns an `ExerciseOutput`
with `stdout`, `stderr` and `success`. Use the compiled exercise as a context
manager, or call `close()`, to remove the executable afterwards:

```python
from drillkit.exercise import CompilationError

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompilationError as error:
    print(error.output.stderr)
```

`temp_file()` gives the executable's name (unique per process and thread) and
`clean()` removes it.

## Editor support

`drillkit.project.RustAnalyzerProject` builds a `rust-project.json` for
rust-analyzer:

```python
from drillkit.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or asks rustc for its sysroot
project.exercises_to_json()        # one crate per .rs file under ./exercises
project.write_to_disk()            # ./rust-project.json
```

## Status lines

`drillkit.ui.warn(message)` prints a red warning line and
`drillkit.ui.success(message)` a green one. Set the environment variable
`NO_EMOJI` for plain symbols instead of emoji; `no_emoji()` reports whether it
is set.

## Worked solutions

`drillkit.lessons` holds worked solutions to many of the exercises, written in
Python:

- `drillkit.lessons.basics`: strings, options, conditionals, functions and lists
- `drillkit.lessons.structs`: orders and packages with shipping fees
- `drillkit.lessons.messages`: messages that change a small piece of state
- `drillkit.lessons.errors`: name tags, token costs and positive non-zero integers
- `drillkit.lessons.iterators`: capitalising words, exact division, factorials
  and counting progress
- `drillkit.lessons.conslist`: a cons list
- `drillkit.lessons.hashmaps`: fruit baskets and a football scores table
- `drillkit.lessons.traits`: appending "Bar" and shared licensing information
- `drillkit.lessons.quizzes`: apple prices, a string transformer and report cards

## What drillkit does not do

drillkit has no command-line program. There is no command to verify all
exercises in order, no watch mode that rechecks on save, no commands to run,
reset, list or show hints for an exercise, and no progress bar; drillkit gives
you the pieces (loading, compiling, running, checking state) to build those
yourself. The worked solutions do not cover the conversion exercises.