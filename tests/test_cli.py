import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustdrill.cli import (
    WatchStatus,
    find_exercise,
    handle_shell_command,
    list_exercises,
    main,
    rustc_exists,
    watch,
)
from rustdrill.exercise import Exercise, Mode

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"

RUSTC_OK = subprocess.CompletedProcess(args=["rustc"], returncode=0, stdout=b"", stderr=b"")


def _info(entries):
    blocks = []
    for name, path, mode, hint in entries:
        blocks.append(
            f'[[exercises]]\nname = "{name}"\npath = "{path}"\nmode = "{mode}"\nhint = "{hint}"\n'
        )
    return "\n".join(blocks)


@pytest.fixture
def state_dir(tmp_path, monkeypatch):
    ex = tmp_path / "exercises"
    ex.mkdir()
    (ex / "pending_exercise.rs").write_text(PENDING)
    (ex / "finished_exercise.rs").write_text(FINISHED)
    (tmp_path / "info.toml").write_text(
        _info(
            [
                ("pending_exercise", "exercises/pending_exercise.rs", "compile", ""),
                ("finished_exercise", "exercises/finished_exercise.rs", "compile", ""),
            ]
        )
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def failure_dir(tmp_path, monkeypatch):
    (tmp_path / "testFailure.rs").write_text("#[test]\nfn passing() {\n    asset!(true);\n}\n")
    (tmp_path / "info.toml").write_text(
        _info([("testFailure", "testFailure.rs", "test", "Hello!")])
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _exercises(root: Path):
    return [
        Exercise("pending_exercise", root / "exercises/pending_exercise.rs", Mode.COMPILE, "p"),
        Exercise("finished_exercise", root / "exercises/finished_exercise.rs", Mode.COMPILE, "f"),
    ]


@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
def test_runs_without_arguments(_run, state_dir, capsys):
    assert main([]) == 0
    assert "Is this your first time?" in capsys.readouterr().out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1


@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
def test_get_hint_for_single_test(_run, failure_dir, capsys):
    assert main(["hint", "testFailure"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
@pytest.mark.parametrize("name", ["compNoExercise.rs", "testNotPassed.rs"])
def test_run_unknown_exercise(_run, name, failure_dir, capsys):
    assert main(["run", name]) == 1
    assert f"No exercise found for '{name}'!" in capsys.readouterr().out


def test_run_single_test_no_filename(capsys):
    with pytest.raises(SystemExit) as info:
        main(["run"])
    assert info.value.code == 2
    assert "required" in capsys.readouterr().err


def test_reset_no_exercise(capsys):
    with pytest.raises(SystemExit) as info:
        main(["reset"])
    assert info.value.code == 2
    assert "required" in capsys.readouterr().err


@mock.patch("rustdrill.run.subprocess.Popen")
@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
def test_reset_single_exercise(_run, popen, state_dir):
    assert main(["reset", "pending_exercise"]) == 0
    popen.assert_called_once_with(["git", "stash", "--", "exercises/pending_exercise.rs"])


@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
def test_list_both_done_and_pending(_run, state_dir, capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Done" in out and "Pending" in out
    assert "Progress: You completed 1 / 2 exercises (50.0 %)." in out


@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
def test_list_without_pending(_run, state_dir, capsys):
    assert main(["list", "--solved"]) == 0
    out = capsys.readouterr().out
    assert "Pending" not in out
    assert "finished_exercise" in out


@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
def test_list_without_done(_run, state_dir, capsys):
    assert main(["list", "--unsolved"]) == 0
    out = capsys.readouterr().out
    assert "Done" not in out
    assert "pending_exercise" in out


def test_list_names_with_filter(state_dir, capsys):
    done = list_exercises(_exercises(Path(".")), names=True, filter="FINISHED")
    out = capsys.readouterr().out.splitlines()
    assert done == 1
    assert out[0] == "finished_exercise"
    assert len(out) == 2


def test_list_paths(state_dir, capsys):
    list_exercises(_exercises(Path(".")), paths=True)
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["exercises/pending_exercise.rs", "exercises/finished_exercise.rs"]


def test_find_exercise_by_name(state_dir):
    found = find_exercise("finished_exercise", _exercises(state_dir))
    assert found.name == "finished_exercise"


def test_find_next_is_first_pending(state_dir):
    assert find_exercise("next", _exercises(state_dir)).name == "pending_exercise"


def test_find_next_when_all_done(state_dir):
    done_only = _exercises(state_dir)[1:]
    with pytest.raises(LookupError, match="no more exercises"):
        find_exercise("next", done_only)


def test_find_missing_exercise(state_dir):
    with pytest.raises(LookupError, match="No exercise found for 'nope'!"):
        find_exercise("nope", _exercises(state_dir))


@mock.patch("rustdrill.cli.subprocess.run", side_effect=FileNotFoundError)
def test_rustc_missing(_run):
    assert rustc_exists() is False


@mock.patch("rustdrill.cli.subprocess.run", return_value=RUSTC_OK)
def test_rustc_present(_run):
    assert rustc_exists() is True


def test_shell_hint(capsys):
    assert handle_shell_command("hint\n", "look closer") is False
    assert capsys.readouterr().out == "look closer\n"


def test_shell_quit(capsys):
    assert handle_shell_command("quit") is True
    assert capsys.readouterr().out == "Bye!\n"


def test_shell_empty_command(capsys):
    handle_shell_command("!")
    assert capsys.readouterr().out == "no command provided\n"


def test_shell_unknown(capsys):
    handle_shell_command("dance")
    assert capsys.readouterr().out == "unknown command: dance\n"


def test_shell_missing_program(capsys):
    handle_shell_command("!no_such_program_for_rustdrill_tests --flag")
    assert "failed to execute command `no_such_program_for_rustdrill_tests --flag`" in (
        capsys.readouterr().out
    )


def test_shell_help(capsys):
    assert handle_shell_command("help") is False
    assert "quits watch mode" in capsys.readouterr().out


def test_watch_finishes_when_nothing_left(state_dir):
    assert watch([], False, False) is WatchStatus.FINISHED