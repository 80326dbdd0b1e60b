"""Checking exercises in order, with a progress bar and completion prompts."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from .exercise import CompiledExercise, Done, Exercise, ExerciseFailed, Mode
from .ui import Style, bold, no_emoji, style, success, warn

_BAR_WIDTH = 60
_CLEAR_LINE = "\r\x1b[2K"


class VerifyFailed(Exception):
    """An exercise failed to compile, to run, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


class _Spinner:
    """A one-line status message on stderr, shown only on a terminal."""

    def __init__(self, message: str) -> None:
        self._active = sys.stderr.isatty()
        self.set_message(message)

    def set_message(self, message: str) -> None:
        if self._active:
            sys.stderr.write(f"{_CLEAR_LINE}{message}")
            sys.stderr.flush()

    def finish_and_clear(self) -> None:
        if self._active:
            sys.stderr.write(_CLEAR_LINE)
            sys.stderr.flush()
            self._active = False

    def __enter__(self) -> _Spinner:
        return self

    def __exit__(self, *args) -> None:
        self.finish_and_clear()


class _ProgressBar:
    """A progress bar on stderr, shown only on a terminal."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        self.message = ""
        self._active = sys.stderr.isatty()

    def set_message(self, message: str) -> None:
        self.message = message
        self._draw()

    def inc(self) -> None:
        self.position += 1
        self._draw()

    def _draw(self) -> None:
        if not self._active:
            return
        if self.length:
            filled = min(_BAR_WIDTH * self.position // self.length, _BAR_WIDTH)
        else:
            filled = _BAR_WIDTH
        head = ">" if filled < _BAR_WIDTH else ""
        rest = _BAR_WIDTH - filled - len(head)
        bar = style("#" * filled + head, Style.GREEN) + style("-" * rest, Style.RED)
        sys.stderr.write(
            f"{_CLEAR_LINE}Progress: [{bar}] {self.position}/{self.length} {self.message}\n"
        )
        sys.stderr.flush()


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise VerifyFailed at the first one not passing."""
    num_done, total = progress
    bar = _ProgressBar(num_done, total)
    percentage = num_done / total * 100.0 if total else 0.0
    step = 100.0 / total if total else 0.0
    bar.set_message(f"({percentage:.1f} %)")

    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, True, verbose, success_hints)
        elif exercise.mode is Mode.COMPILE:
            passed = _compile_and_run_interactively(exercise, success_hints)
        else:
            passed = _compile_only(exercise, success_hints)
        if not passed:
            raise VerifyFailed(exercise)
        percentage += step
        bar.inc()
        bar.set_message(f"({percentage:.1f} %)")


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    _compile_and_test(exercise, False, verbose, False)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise VerifyFailed(exercise) from err


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    spinner = _Spinner(f"Compiling {exercise}...")
    with _compile(exercise, spinner):
        pass
    spinner.finish_and_clear()
    return _prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    spinner = _Spinner(f"Compiling {exercise}...")
    with _compile(exercise, spinner) as compiled:
        spinner.set_message(f"Running {exercise}...")
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            spinner.finish_and_clear()
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise VerifyFailed(exercise) from err
        spinner.finish_and_clear()
    return _prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    spinner = _Spinner(f"Testing {exercise}...")
    with _compile(exercise, spinner) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            spinner.finish_and_clear()
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise VerifyFailed(exercise) from err
        spinner.finish_and_clear()
    if verbose:
        print(output.stdout)
    if interactive:
        return _prompt_for_completion(exercise, None, success_hints)
    return True


def _separator() -> str:
    return bold("====================")


def _prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    state = exercise.state()
    if isinstance(state, Done):
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
    else:
        success(f"Successfully compiled {exercise}!")

    quiet = no_emoji()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif quiet:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if quiet:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()
    if success_hints:
        print("Hints:")
        print(_separator())
        print(exercise.hint)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {bold('`I AM NOT DONE`')} comment:")
    print()
    for context_line in state.context:
        line = bold(context_line.line) if context_line.important else context_line.line
        number = style(f"{context_line.number:>2}", Style.BLUE, Style.BOLD)
        print(f"{number} {style('|', Style.BLUE)}  {line}")

    return False