"""Containers: optional values, generic wrappers, cons lists and copy-on-write."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def maybe_icecream(time_of_day: int) -> int | None:
    """Return the ice creams left at an hour of the day, or None for invalid hours."""
    if 0 <= time_of_day <= 21:
        return 5
    if 22 <= time_of_day <= 24:
        return 0
    return None


@dataclass
class Wrapper(Generic[T]):
    value: T


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, Nil()))


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Return the values with negatives made positive.

    The input is returned as is when nothing needs changing; otherwise a new
    list is built and the input is left untouched.
    """
    if all(v >= 0 for v in values):
        return values
    return [abs(v) for v in values]