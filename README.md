# rustlings

A Python library for working with a course of small Rust exercises: it reads
the exercise list, compiles and runs exercises with the Rust toolchain, tells
whether an exercise is still marked as unfinished, and writes a
`rust-project.json` file for rust-analyzer. It also holds Python versions of a
set of solved reference exercises.

## Requirements

- Python 3.11 or later, with no third-party dependencies
- A Rust toolchain with `rustc` on your `PATH` to compile exercises; `cargo`
  for exercises in Clippy mode

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Exercises

`rustlings.exercise.load_exercises(path="info.toml")` reads the `[[exercises]]`
entries of an `info.toml` file, each with `name`, `path`, `mode` and `hint`,
and returns a list of `Exercise` objects. A missing field raises `ValueError`.

`Mode` is one of `COMPILE`, `TEST` and `CLIPPY` (`"compile"`, `"test"`,
`"clippy"` in `info.toml`).

```python
from rustlings.exercise import CompileError, RunError, load_exercises

for exercise in load_exercises("info.toml"):
    print(exercise.name, "done" if exercise.looks_done() else "pending")

exercise = load_exercises("info.toml")[0]
try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except CompileError as err:
    print(err.output.stderr)
except RunError as err:
    print(err.output.stdout, err.output.stderr)
```

- `Exercise.compile()` calls `rustc` (with `--test` in test mode) and returns a
  `CompiledExercise`. In Clippy mode it writes
  `./exercises/22_clippy/Cargo.toml`, builds the binary, then runs
  `cargo clean` and `cargo clippy` with warnings denied. On failure it raises
  `CompileError`, whose `output` is an `ExerciseOutput` with `stdout` and
  `stderr`.
- `CompiledExercise.run()` runs the binary (with `--show-output` in test mode)
  and returns its `ExerciseOutput`, or raises `RunError`. `close()`, also
  called on leaving a `with` block, removes the temporary binary.
- `Exercise.state()` returns an empty list when the file no longer holds an
  `// I AM NOT DONE` comment. Otherwise it returns the `ContextLine`s around
  the marker: up to two lines on either side, each with `line`, 1-based
  `number` and `important`, which is true for the marker line.
- `Exercise.looks_done()` is true when `state()` is empty.
- `temp_file()` names the temporary binary for the current process and thread;
  `clean()` removes it.

## rust-analyzer project file

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`get_sysroot_src()` uses `RUST_SRC_PATH` when it is set, and otherwise asks
`rustc --print sysroot` and points at its `lib/rustlib/src/rust/library`.
`exercises_to_json(root)` adds a `Crate` (edition 2021, `cfg` of `test`) for
every `.rs` file below `root`; `add_path(path)` does so for one file.
`to_json()` returns the compact JSON that `write_to_disk(path)` writes.

## Terminal messages

`rustlings.ui.warn(message)` and `rustlings.ui.success(message)` print a red
warning or a green success line with an emoji prefix, or with `!` and `✓` when
the `NO_EMOJI` environment variable is set (`no_emoji()` checks it). Colour is
used only when standard output is a terminal and `NO_COLOR` is not set.

## Reference exercises

- `rustlings.basics`: `sale_price`, `is_even`, `square`, `bigger`,
  `foo_if_fizz`, `animal_habitat`
- `rustlings.quizzes`: `calculate_price_of_apples`; `transformer` with the
  commands `Uppercase`, `Trim` and `Append`; `ReportCard` with numeric or
  letter grades
- `rustlings.structures`: colour structs, `Order` and
  `create_order_template`, `Package`, a `State` driven by `Move`, `Echo`,
  `ChangeColor` and `Quit` messages, and `Rectangle`
- `rustlings.sequences`: `array_and_vec`, `vec_loop`, `vec_map`, `fill_vec`,
  `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`
- `rustlings.hashmaps`: `Fruit`, `new_fruit_basket`, `fill_fruit_basket`,
  `Team` and `build_scores_table`
- `rustlings.errors`: `maybe_icecream`, `generate_nametag_text`, `total_cost`,
  `PositiveNonzeroInteger` with `CreationError`, and `parse_pos_nonzero` with
  `ParsePosNonzeroError`
- `rustlings.iterators`: capitalisation helpers, `divide` with
  `NotDivisibleError` and `DivideByZeroError`, `result_with_list`,
  `list_of_results`, `factorial`, and `Progress` counting functions
- `rustlings.traits`: `append_bar`, `Licensed` with `SomeSoftware` and
  `OtherSoftware`, `compare_license_types`, `Wrapper`, and `Cons` lists with
  `create_empty_list` and `create_non_empty_list`

## What this package does not do

The package is a library only. It installs no command: there is no program to
verify all exercises in order, run or reset a single exercise, print hints,
list progress, or watch the exercise files and re-check them on change. Those
steps are left to your own code built on `Exercise`, `CompiledExercise` and
`RustAnalyzerProject`. It has no Python versions of the conversion exercises.