# rustdrill

`rustdrill` walks you through a directory of small Rust exercises. It compiles
and runs each one with `rustc` (or lints it with `cargo clippy`), tells you what
went wrong, shows hints, and keeps track of how far you have got.

## Requirements

- Python 3.11 or newer
- A working Rust toolchain: `rustc` must be on your `PATH`, and `cargo` as well
  for the clippy exercises
- `git`, for resetting an exercise

## Installation

```
pip install .
```

## The exercise directory

`rustdrill` is run from the top of an exercise directory. That directory holds
an `info.toml` file listing the exercises in their recommended order, and an
`exercises/` directory with the Rust sources. Each entry in `info.toml` has a
`name`, a `path`, a `mode` (`compile`, `test` or `clippy`) and a `hint`.
Without an `info.toml` in the current directory, or without `rustc`, every
command stops with exit status 1.

An exercise counts as pending while its source still carries an
`// I AM NOT DONE` comment. Once it compiles (and its tests pass), remove that
line to move on to the next one.

## Commands

Run without arguments for a short introduction:

```
rustdrill
rustdrill --version
```

Work through the exercises in order, re-checking whenever a `.rs` file below
`exercises/` changes:

```
rustdrill watch
rustdrill watch --success-hints
```

While watch mode is running you can type:

- `hint` to print the hint for the current exercise
- `clear` to clear the screen
- `quit` to leave watch mode
- `!<cmd>` to run a command, for example `!rustc --explain E0381`
- `help` to list these commands

Check every exercise once, in order, stopping at the first failure (exit
status 1):

```
rustdrill verify
```

Compile and run, or test, a single exercise; `next` picks the first pending
one. `--nocapture` shows the output of test exercises:

```
rustdrill run if1
rustdrill run next
rustdrill --nocapture run tests3
```

Show the hint for an exercise:

```
rustdrill hint if1
```

Put an exercise back the way it was; this starts `git stash -- <path>`:

```
rustdrill reset if1
```

List exercises with their status and your overall progress:

```
rustdrill list
rustdrill list --unsolved
rustdrill list --solved
rustdrill list --filter if,strings
rustdrill list --paths
rustdrill list --names
```

Write a `rust-project.json` in the current directory so rust-analyzer
understands the exercise files:

```
rustdrill lsp
```

The toolchain's library sources are located with `rustc --print sysroot`,
unless `RUST_SRC_PATH` is set.

## Output

Messages use emoji by default. Set the `NO_EMOJI` environment variable to get
plain text instead. Colours are used when standard output is a terminal;
`CLICOLOR=0` turns them off and `CLICOLOR_FORCE=1` forces them on.

## Worked solutions

The `rustdrill.lessons` package holds worked solutions to many of the
exercises, written as ordinary Python, grouped by topic: `basics`, `strings`,
`traits`, `collections`, `structs`, `errors`, `conversions` and
`smart_pointers`. For example:

```python
from rustdrill.lessons.basics import calculate_price_of_apples
from rustdrill.lessons.conversions import parse_person
from rustdrill.lessons.strings import capitalize_words_string

calculate_price_of_apples(41)               # 41
parse_person("Mark,20")                     # Person(name='Mark', age=20)
capitalize_words_string(["hello", " ", "world"])  # 'Hello World'
```

There are no worked solutions for the iterator lessons (division with errors,
factorial, progress counting, averages).

## Using it from Python

The pieces behind the commands can be used directly:

```python
from rustdrill.exercise import load_exercises
from rustdrill.verify import VerifyFailed, verify

exercises = load_exercises("info.toml")
pending = [exercise for exercise in exercises if not exercise.looks_done()]

try:
    verify(exercises, (0, len(exercises)))
except VerifyFailed as failed:
    print(failed.exercise.hint)
```

`rustdrill.cli.main` takes an optional list of arguments and returns the exit
status instead of exiting.