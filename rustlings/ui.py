"""Coloured status messages for the terminal."""

from __future__ import annotations

import os
import sys

_RED = "31"
_GREEN = "32"
_BLUE = "34"
_BOLD = "1"


def _colour_enabled() -> bool:
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def _style(text: object, *codes: str) -> str:
    """Wrap ``text`` in ANSI codes when standard output is a colour terminal."""
    text = str(text)
    if not codes or not _colour_enabled():
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _announce(message: str, emoji: str, fallback: str, colour: str) -> None:
    prefix = fallback if no_emoji() else emoji
    print(f"{_style(prefix, colour)} {_style(message, colour)}")


def warn(message: str) -> None:
    """Print a warning in red, prefixed with a warning sign."""
    _announce(message, "⚠️ ", "!", _RED)


def success(message: str) -> None:
    """Print a success message in green, prefixed with a check mark."""
    _announce(message, "✅", "✓", _GREEN)