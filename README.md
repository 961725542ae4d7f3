# rustdrills

A Python library for working through a collection of small Rust exercises.
Each exercise is a `.rs` file that fails to compile, fails its tests or
upsets Clippy until it is fixed. `rustdrills` reads the list of exercises,
compiles and runs them with the Rust toolchain, reports what went wrong and
tells finished exercises from pending ones.

## Requirements

- Python 3.11 or later
- A Rust toolchain with `rustc` on your `PATH` (and `cargo` with Clippy for
  the lint exercises)

## Installing

```
pip install .
```

## The exercise list

Exercises are described in an `info.toml` file. Each `[[exercises]]` entry
gives a `name`, a `path`, a `mode` (`compile`, `test` or `clippy`) and a
`hint`.

```python
from rustdrills.exercise import load_exercises, parse_exercises

exercises = load_exercises("info.toml")   # or parse_exercises(text)
```

A missing field raises `ValueError`.

## Working with one exercise

`Exercise` holds the name, path, `Mode` and hint. Its string form is the
path.

- `Exercise.compile()` builds the exercise with `rustc` (with `--test` in
  test mode; in clippy mode it also writes `exercises/clippy/Cargo.toml` and
  runs `cargo clean` and `cargo clippy`). It returns a `CompiledExercise`
  or raises `ExerciseFailed`, whose `output` holds the captured stdout and
  stderr.
- `CompiledExercise.run()` runs the built binary and returns an
  `ExerciseOutput`, or raises `ExerciseFailed`. The binary is a temporary
  file in the current directory, removed by `close()` or when the object is
  used as a context manager.
- `Exercise.state()` reads the source and returns a `State`. An exercise is
  pending while it still holds an `// I AM NOT DONE` comment; the state then
  carries the `ContextLine`s around that comment (two lines either side,
  with the marker line flagged `important`). `State.done()` and
  `Exercise.looks_done()` tell the two apart.
- `pending_context(source)` gives the same context lines for a string.

```python
from rustdrills.exercise import ExerciseFailed

exercise = exercises[0]
try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except ExerciseFailed as error:
    print(error.output.stderr)
```

## Verifying in order

`rustdrills.verify.verify(exercises, (num_done, total), verbose)` checks
exercises one after another with a progress bar: test exercises are built
and their tests run, compile exercises are built and run, clippy exercises
are linted. It raises `VerificationFailed` (with the offending `exercise`)
at the first one that fails to build, fails its run, or still carries the
pending comment. For a pending exercise that passes, it first prints a
success message, the program's output and the lines around the comment to
remove (`prompt_for_completion`).

`rustdrills.verify.test(exercise, verbose)` builds and runs a single
exercise's tests without looking at the pending comment. With `verbose`
the test output is printed.

## rust-analyzer support

`rustdrills.project.RustAnalyzerProject` builds a `rust-project.json`:

```python
from rustdrills.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # RUST_SRC_PATH, or asked of `rustc --print sysroot`
project.exercises_to_json()      # every .rs file below ./exercises becomes a Crate
project.write_to_disk()          # ./rust-project.json
```

## Output

`rustdrills.ui.warn` and `rustdrills.ui.success` print coloured status
lines. Setting the `NO_EMOJI` environment variable replaces emoji in all
messages with plain characters (`rustdrills.ui.no_emoji`).

## Reference solutions

The `rustdrills.drills` package holds Python counterparts of many of the
exercise programs, useful for checking what an exercise is expected to do:

- `basics` – `bigger`, `foo_if_fizz`, `sale_price`, `is_even`, `square`,
  `array_and_vec`, `vec_loop`, `vec_map`, `longest`
- `quizzes` – `calculate_price_of_apples`, `transformer` with the
  `Uppercase`, `Trim` and `Append` commands, `ReportCard`
- `strings` – `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`
- `enums` – a `State` driven by `ChangeColor`, `Echo`, `Move` and `Quit`
  messages
- `errors` – `generate_nametag_text`, `total_cost`, `remaining_tokens`,
  `PositiveNonzeroInteger` and `parse_pos_nonzero`
- `hashmaps` – `fruit_basket`, `fill_basket`, `build_scores_table`
- `options` – `maybe_icecream`
- `iterators` – `capitalize_first`, `divide`, `factorial`, the `Progress`
  counters and friends
- `structs` – `create_order_template`, `Package`
- `traits` – `append_bar` for strings and lists
- `pointers` – cons lists (`Cons`, `Nil`) and `abs_all`

```python
from rustdrills.drills.iterators import divide

divide(81, 9)   # 9
```

## What it does not do

There is no command-line program. Running a single exercise by name,
resetting an exercise with git, listing exercises with their status,
printing hints and a watch mode that re-checks on file changes are not
provided; use the library functions above to build them. The conversion
exercises have no reference solutions here.