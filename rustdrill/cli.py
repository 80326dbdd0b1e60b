"""Command line entry point: list, run, verify and watch exercises."""

from __future__ import annotations

import argparse
import enum
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Sequence
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .project import RustAnalyzerProject
from .run import reset, run
from .verify import VerifyFailed, verify

_VERSION = "1.0.0"
_DEBOUNCE_SECONDS = 1.0

WELCOME = r"""       welcome to...
                 _      _      _ _ _
  _ __ _   _ ___| |_ __| |_ __(_) | |
 | '__| | | / __| __/ _` | '__| | | |
 | |  | |_| \__ \ || (_| | |  | | | |
 |_|   \__,_|___/\__\__,_|_|  |_|_|_|"""

DEFAULT_OUT = """Thanks for installing rustdrill!

Is this your first time? Don't worry, rustdrill was made for beginners! We are
going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how rustdrill operates:

1. The central concept behind rustdrill is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   rustdrill will be able to move on to the next exercise.
2. If you run rustdrill in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run rustdrill! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `rustdrill hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue in the
   project's tracker. We look at every issue, and sometimes, other learners do
   too so you can help each other out!
5. If you want to use `rust-analyzer` with exercises, which provides features like
   autocompletion, run the command `rustdrill lsp`.

Got all that? Great! To get started, run `rustdrill watch` in order to get the first
exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+--------------------------  ------------------------+
                           \\/\x1b[31m
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒
           ▒▒  ▒▒                      ▒▒  ▒▒\x1b[0m

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""

_SHELL_HELP = """Commands available to you in watch mode:
  hint   - prints the current exercise's hint
  clear  - clears the screen
  quit   - quits watch mode
  !<cmd> - executes a command, like `!rustc --explain E0381`
  help   - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


def rustc_exists() -> bool:
    """True when `rustc --version` runs successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """The exercise called ``name``, or the first pending one for "next".

    Raises LookupError with the message to show when nothing matches.
    """
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> int:
    """Print the matching exercises and a progress line; return the number done."""
    out = sys.stdout
    if not paths and not names:
        out.write(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}\n")
    filters = [f for f in (filter or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        filter_cond = any(f in exercise.name or f in fname for f in filters)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        solve_cond = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if solve_cond and (filter_cond or filter is None):
            if paths:
                line = f"{fname}\n"
            elif names:
                line = f"{exercise.name}\n"
            else:
                line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}\n"
            out.write(line)
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else 0.0
    out.write(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.1f} %).\n"
    )
    out.flush()
    return done_count


def handle_shell_command(command: str, hint: str | None = None) -> bool:
    """Carry out one watch-mode shell command; return True when asked to quit."""
    text = command.strip()
    if text == "hint":
        if hint is not None:
            print(hint)
    elif text == "clear":
        print("\x1b[2J\x1b[1;1H")
    elif text == "quit":
        print("Bye!")
        return True
    elif text == "help":
        print(_SHELL_HELP)
    elif text.startswith("!"):
        cmd = text[1:]
        parts = cmd.split()
        if not parts:
            print("no command provided")
        else:
            try:
                subprocess.run(parts, check=False)
            except OSError as err:
                print(f"failed to execute command `{cmd}`: {err}")
    else:
        print(f"unknown command: {text}")
    return False


class _ChangeCollector(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[str]) -> None:
        self._changes = changes

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        self._changes.put(str(event.src_path))
        dest = getattr(event, "dest_path", "")
        if dest:
            self._changes.put(str(dest))


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = tuple(part for part in suffix.parts if part != ".")
    return len(tail) <= len(path.parts) and path.parts[len(path.parts) - len(tail):] == tail


def _clear_screen() -> None:
    print("\x1bc")


def _debounced(changes: queue.Queue[str], first: str) -> list[str]:
    seen = {first: None}
    deadline = time.monotonic() + _DEBOUNCE_SECONDS
    while (remaining := deadline - time.monotonic()) > 0:
        try:
            seen[changes.get(timeout=remaining)] = None
            deadline = time.monotonic() + _DEBOUNCE_SECONDS
        except queue.Empty:
            break
    return list(seen)


def _spawn_watch_shell(hint_holder: dict, lock: threading.Lock, quit_event: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview "
        "of the commands you can use here."
    )

    def loop() -> None:
        while not quit_event.is_set():
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as err:
                print(f"error reading command: {err}")
                return
            if not line:
                return
            with lock:
                hint = hint_holder.get("hint")
            if handle_shell_command(line, hint):
                quit_event.set()

    threading.Thread(target=loop, daemon=True).start()


def watch(
    exercises: Sequence[Exercise], verbose: bool = False, success_hints: bool = False
) -> WatchStatus:
    """Verify exercises again whenever a file below ./exercises changes."""
    changes: queue.Queue[str] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeCollector(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose, success_hints)
            return WatchStatus.FINISHED
        except VerifyFailed as failed:
            hint_holder = {"hint": failed.exercise.hint}
        lock = threading.Lock()
        quit_event = threading.Event()
        _spawn_watch_shell(hint_holder, lock, quit_event)
        while True:
            try:
                first = changes.get(timeout=1.0)
            except queue.Empty:
                first = None
            if first is not None:
                for changed in _debounced(changes, first):
                    event_path = Path(changed)
                    if event_path.suffix != ".rs" or not event_path.exists():
                        continue
                    filepath = event_path.resolve()
                    current = [e for e in exercises if _ends_with(filepath, e.path)][:1]
                    others = [
                        e
                        for e in exercises
                        if not _ends_with(filepath, e.path) and not e.looks_done()
                    ]
                    num_done = sum(
                        1
                        for e in exercises
                        if e.looks_done() and not _ends_with(filepath, e.path)
                    )
                    _clear_screen()
                    try:
                        verify(
                            current + others,
                            (num_done, len(exercises)),
                            verbose,
                            success_hints,
                        )
                        return WatchStatus.FINISHED
                    except VerifyFailed as failed:
                        with lock:
                            hint_holder["hint"] = failed.exercise.hint
            if quit_event.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustdrill",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--nocapture", action="store_true", help="Show outputs from the test exercises"
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("verify", help="Verify all exercises according to the recommended order")
    watch_cmd = sub.add_parser("watch", help="Rerun `verify` when files were edited")
    watch_cmd.add_argument("--success-hints", action="store_true", help="Show hints on success")
    for name, text in (
        ("run", "Run/Test a single exercise"),
        ("reset", 'Reset a single exercise using "git stash -- <filename>"'),
        ("hint", "Return a hint for the given exercise"),
    ):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("name", help="The name of the exercise")
    list_cmd = sub.add_parser("list", help="List the exercises available")
    list_cmd.add_argument("-p", "--paths", action="store_true", help="Show only the paths")
    list_cmd.add_argument("-n", "--names", action="store_true", help="Show only the names")
    list_cmd.add_argument(
        "-f", "--filter", default=None, help="Comma separated patterns to match exercise names"
    )
    list_cmd.add_argument("-u", "--unsolved", action="store_true", help="Only unsolved exercises")
    list_cmd.add_argument("-s", "--solved", action="store_true", help="Only solved exercises")
    sub.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    project.exercises_to_json()
    if not project.crates:
        print("Failed find any exercises, make sure you're in the `rustdrill` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustdrill directory")
        print("Try `cd rustdrill/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    if args.command == "list":
        try:
            list_exercises(
                exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
            )
        except BrokenPipeError:
            return 0
        return 0

    if args.command in ("run", "reset", "hint"):
        try:
            exercise = find_exercise(args.name, exercises)
        except LookupError as err:
            print(err)
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        if args.command == "reset":
            try:
                reset(exercise)
            except OSError:
                return 1
            return 0
        try:
            run(exercise, verbose)
        except VerifyFailed:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises, (0, len(exercises)), verbose, False)
        except VerifyFailed:
            return 1
        return 0

    if args.command == "lsp":
        return _lsp()

    try:
        status = watch(exercises, verbose, args.success_hints)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        print("🎉 All exercises completed! 🎉")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustdrill watch` again"
        )
    return 0