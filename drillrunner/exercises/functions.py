"""Functions: parameters, return values and calling one function from another."""

from __future__ import annotations


def call_me(num: int) -> None:
    """Print one ring line per call, numbered from 1."""
    for i in range(num):
        print(f"Ring! Call number {i + 1}")


def is_even(num: int) -> bool:
    """Return True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """Return num multiplied by itself."""
    return num * num