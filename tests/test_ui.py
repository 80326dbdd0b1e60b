import pytest

from rustdrill import ui


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("CLICOLOR", "0")


@pytest.fixture
def forced(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_success_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran done")
    assert capsys.readouterr().out == "✓ Successfully ran done\n"


def test_success_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_warn_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("oops")
    assert capsys.readouterr().out == "! oops\n"


def test_warn_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("oops")
    assert capsys.readouterr().out == "⚠️  oops\n"


def test_bold_plain_returns_text(plain):
    assert ui.bold("hi") == "hi"


def test_bold_forced_wraps_text(forced):
    assert ui.bold("hi") == "\x1b[1mhi\x1b[0m"


def test_warn_forced_is_red(forced, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("oops")
    out = capsys.readouterr().out
    assert "\x1b[31m" in out
    assert "oops" in out


def test_style_without_codes_is_plain(forced):
    assert ui.style("text") == "text"