"""Strings: building, comparing, trimming and replacing text."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True for the colour words this module knows."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """Return the longer text by UTF-8 byte length; y when they tie."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y