"""Terminal output helpers: coloured status lines with optional emoji."""

from __future__ import annotations

import enum
import os
import sys


class Style(enum.IntEnum):
    """ANSI SGR codes used by the command line output."""

    BOLD = 1
    RED = 31
    GREEN = 32
    BLUE = 34


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def style(text: object, *codes: Style) -> str:
    """Wrap ``text`` in the given ANSI styles when colours are enabled."""
    if not codes or not _colors_enabled():
        return str(text)
    sequence = ";".join(str(int(code)) for code in codes)
    return f"\x1b[{sequence}m{text}\x1b[0m"


def no_emoji() -> bool:
    """True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def bold(text: object) -> str:
    """Return ``text`` in bold."""
    return style(text, Style.BOLD)


def warn(message: str) -> None:
    """Print a red warning line."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{style(marker, Style.RED)} {style(message, Style.RED)}")


def success(message: str) -> None:
    """Print a green success line."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{style(marker, Style.GREEN)} {style(message, Style.GREEN)}")