# drillrunner

drillrunner is a Python library for working with a collection of small
programming exercises. Each exercise is a source file listed in an `info.toml`
file. The library loads that list and compiles each exercise with `rustc`, or
lints it with `cargo clippy`. It runs the resulting binary and tells you whether
an exercise is still pending. An exercise counts as pending while it still holds
an `I AM NOT DONE` marker comment.

It also holds reference solutions to the exercise topics, written in plain Python.

## Installation

```
pip install .
```

Compiling exercises needs `rustc` on your `PATH`, and `cargo` for lint
exercises.

## Loading and inspecting exercises

```python
from drillrunner.exercise import load_exercises

exercises = load_exercises("info.toml")
for exercise in exercises:
    print(exercise.name, exercise.mode.value, exercise.looks_done())
```

Each `Exercise` has a `name`, a `path`, a `mode` (`Mode.COMPILE`, `Mode.TEST`
or `Mode.CLIPPY`) and a `hint`. `str(exercise)` gives its path.

`Exercise.state()` returns `None` when the marker is gone. Otherwise it returns
the lines around the first marker as `ContextLine` objects. There are up to two
lines on each side. Each has `line`, `number` (counted from 1) and `important`,
which is true for the marker line itself.

## Compiling and running

```python
from drillrunner.exercise import ExerciseFailed

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except ExerciseFailed as err:
    print(err.output.stderr)
```

`compile()` writes a temporary binary named after the process and thread. It
returns a `CompiledExercise`, which removes that binary on `close()` or when its
`with` block ends. Test exercises are run with `--show-output`. A failed compile
or run raises `ExerciseFailed`, which carries the captured `ExerciseOutput`
(`stdout` and `stderr`). If a tool cannot be started at all, `RuntimeError` is
raised.

A lint exercise writes `exercises/clippy/Cargo.toml` and builds a binary. It
then runs `cargo clean` and `cargo clippy` with warnings treated as errors.

## Editor support

`drillrunner.project.RustAnalyzerProject` builds the contents of a
`rust-project.json` file:

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # asks `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("./rust-project.json")
```

Each file whose name after its first dot is `rs` becomes a crate with edition
2021 and the `test` cfg.

## Status lines

`drillrunner.ui.warn(message)` prints a red line and `drillrunner.ui.success(message)`
prints a green one. When the `NO_EMOJI` environment variable is set, plain `!`
and `✓` are shown instead of emoji.

## Worked examples

The `drillrunner.exercises` package holds reference solutions. Its modules are
`structs`, `errors`, `conditionals`, `functions`, `quizzes`, `collections`,
`iterators`, `strings`, `enums`, `traits`, `containers` and `concurrency`:

```python
from drillrunner.exercises.conditionals import calculate_price_of_apples
from drillrunner.exercises.iterators import capitalize_words_string

calculate_price_of_apples(41)                      # 41
capitalize_words_string(["hello", " ", "world"])  # "Hello World"
```

## What it does not do

drillrunner has no command-line program. It does not verify all exercises in
order, watch files for changes, list progress, print hints or reset exercises.
Write those on top of the library if you need them. The worked examples do not
cover type conversions.

## Running the tests

```
pip install ".[test]"
pytest
```