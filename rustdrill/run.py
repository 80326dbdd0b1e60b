"""Running a single exercise and resetting it through git."""

from __future__ import annotations

import subprocess

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import VerifyFailed, _Spinner, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise, or run its tests; raise VerifyFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Start ``git stash -- <path>`` for the exercise and return the process."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    spinner = _Spinner(f"Compiling {exercise}...")
    try:
        compiled = exercise.compile()
    except ExerciseFailed as err:
        spinner.finish_and_clear()
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(err.output.stderr)
        raise VerifyFailed(exercise) from err

    with compiled:
        spinner.set_message(f"Running {exercise}...")
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            spinner.finish_and_clear()
            print(err.output.stdout)
            print(err.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise VerifyFailed(exercise) from err
        spinner.finish_and_clear()

    print(output.stdout)
    success(f"Successfully ran {exercise}")