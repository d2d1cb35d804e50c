"""Coloured status lines shown to the learner."""

from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, style: str) -> None:
    prefix = fallback if no_emoji() else symbol
    console = Console(file=sys.stdout, highlight=False, emoji=False)
    console.print(
        Text.assemble((prefix, style), " ", (message, style)),
        soft_wrap=True,
    )


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅", "✓", message, "green")