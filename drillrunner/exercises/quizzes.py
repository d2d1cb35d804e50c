"""Quizzes: a small string-transforming machine and printable report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class Command:
    """An action applied to a string."""


@dataclass(frozen=True)
class Uppercase(Command):
    pass


@dataclass(frozen=True)
class Trim(Command):
    pass


@dataclass(frozen=True)
class Append(Command):
    count: int


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(count=count):
                output.append(text + "bar" * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard(Generic[T]):
    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )